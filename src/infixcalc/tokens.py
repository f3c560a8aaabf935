'''
Tokens passed between the lexer and the machine.

A token is exactly one of Number, Operator or Paren.
'''

from collections import namedtuple
from enum import Enum
import operator


class Number(namedtuple('Number', 'value')):
    '''
    Numeric literal, sign already folded in for unary minus.
    '''
    __slots__ = ()

    def __str__(self):
        return repr(self.value)


class Operator(Enum):
    '''
    Binary arithmetic operators, with precedence and implementation.
    '''
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def precedence(self):
        return _PRECEDENCE[self]

    def __call__(self, left, right):
        return _FUNCTIONS[self](left, right)

    def __str__(self):
        return self.value


class Paren(Enum):
    OPEN = '('
    CLOSE = ')'

    def __str__(self):
        return self.value


_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

_FUNCTIONS = {
    Operator.ADD: operator.__add__,
    Operator.SUB: operator.__sub__,
    Operator.MUL: operator.__mul__,
    Operator.DIV: operator.__truediv__,
}

# Characters the keypad and the lexer treat as operators.
OPERATORS = frozenset(op.value for op in Operator)
