'''
Lexer tests
'''

import regex

from infixcalc.util import CalcSyntaxError
from infixcalc.lexer import Lexer, tokenize
from infixcalc.tokens import Number, Operator, Paren

from pytest import raises


def test_numbers_and_operators():
    assert tokenize('12+3*4') == [Number(12.0), Operator.ADD, Number(3.0),
                                  Operator.MUL, Number(4.0)]


def test_whitespace_skipped():
    assert tokenize(' 1 /  2 ') == [Number(1.0), Operator.DIV, Number(2.0)]


def test_decimal():
    assert tokenize('.5') == [Number(0.5)]
    assert tokenize('2.25') == [Number(2.25)]


def test_multiple_decimal_points():
    with raises(CalcSyntaxError, match='multiple decimal points'):
        tokenize('1.2.3')


def test_lone_dot():
    with raises(CalcSyntaxError, match=regex.escape('invalid number format: .')):
        tokenize('.')


def test_leading_unary_minus():
    assert tokenize('-4') == [Number(-4.0)]


def test_unary_minus_after_paren():
    assert tokenize('2*(-3)') == [Number(2.0), Operator.MUL, Paren.OPEN,
                                  Number(-3.0), Paren.CLOSE]


def test_binary_minus():
    assert tokenize('8-3') == [Number(8.0), Operator.SUB, Number(3.0)]


def test_dangling_unary_minus():
    tokens = tokenize('-')
    assert tokens == [Number(-0.0)]
    assert str(tokens[0]) == '-0.0'


def test_consecutive_operators():
    with raises(CalcSyntaxError, match='consecutive operators'):
        tokenize('1+*2')
    with raises(CalcSyntaxError, match='consecutive operators'):
        tokenize('1*-2')


def test_unbalanced_close():
    with raises(CalcSyntaxError, match='mismatched parentheses'):
        tokenize('1)+(2')


def test_unbalanced_open():
    with raises(CalcSyntaxError, match='mismatched parentheses'):
        tokenize('(1+2')


def test_unknown_characters_skipped():
    assert tokenize('1x+y2') == [Number(1.0), Operator.ADD, Number(2.0)]


def test_lexer_is_reusable():
    l = Lexer()
    assert list(l.lex('1+1')) == list(l.lex('1+1'))
