'''
Keypad calculator.

Builds an infix arithmetic expression one key at a time (digits, + - * /,
equals and clear), keeps a display string up to date, and evaluates the
expression on equals: tokenizer, shunting-yard to postfix, stack machine,
result formatting. Results chain into the next expression.
'''

from .cli import CLI
from .lexer import Lexer, tokenize
from .machine import Machine, to_postfix, eval_postfix, format_result, evaluate
from .state import Calculator, State, INITIAL
from .util import (CalcError, CalcSyntaxError, EvalError, InvalidExpression,
                   ExpressionTooLong)


__all__ = ('Calculator', 'State', 'INITIAL',
           'Lexer', 'tokenize',
           'Machine', 'to_postfix', 'eval_postfix', 'format_result',
           'evaluate',
           'CLI',
           'CalcError', 'CalcSyntaxError', 'EvalError', 'InvalidExpression',
           'ExpressionTooLong')
