from functools import reduce
import logging
import operator

import regex

from .tokens import Number, Operator, Paren, OPERATORS
from .util import CalcSyntaxError, wrap_user_errors


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for infix arithmetic.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Digits and dots; how many dots is checked after matching, so that a
    # bad literal is reported instead of split in two.
    NUMBER = r'[\d.]+'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, sorted(OPERATORS))) + r')'
    SPACE = r'\s+'

    # All possible lexemes. Anything else is a single skipped character.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<open>\()|' \
             r'(?<close>\))|' \
             r'(?<other>.)'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self):
        self._lexeme = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        self._number_run = regex.compile(type(self).NUMBER,
                                         flags=type(self).FLAGS)

    def lex(self, text):
        '''
        Take an expression and yield its tokens.

        Raises CalcSyntaxError on the first malformed lexeme, and at the end
        if parentheses do not balance.
        '''
        depth = 0
        pos = 0
        while pos < len(text):
            match = self._lexeme.match(text, pos)
            kind = match.lastgroup
            lexeme = match.group(0)
            previous = text[pos - 1] if pos else None
            pos = match.end()
            if kind == 'number':
                yield self._number(lexeme)
            elif kind == 'operator':
                if previous in OPERATORS:
                    raise CalcSyntaxError('consecutive operators')
                if lexeme == '-' and previous in {None, '('}:
                    # Unary minus: folded into the literal that follows.
                    run = self._number_run.match(text, pos)
                    if run is None:
                        yield Number(-0.0)
                    else:
                        pos = run.end()
                        yield self._number('-' + run.group(0))
                else:
                    yield Operator(lexeme)
            elif kind == 'open':
                depth += 1
                yield Paren.OPEN
            elif kind == 'close':
                depth -= 1
                if depth < 0:
                    raise CalcSyntaxError('mismatched parentheses')
                yield Paren.CLOSE
            elif kind == 'other':
                logger.debug('Skipping %r at %d', lexeme, pos - 1)
        if depth != 0:
            raise CalcSyntaxError('mismatched parentheses')

    @wrap_user_errors('invalid number format: {1}', CalcSyntaxError)
    def _number(self, lexeme):
        '''
        Convert a digit run (optionally signed) to a Number token.
        '''
        if lexeme.count('.') > 1:
            raise CalcSyntaxError('multiple decimal points')
        return Number(float(lexeme))


def tokenize(text):
    '''
    Return the full token list of text.
    '''
    return list(Lexer().lex(text))
