'''
Keypad input state machine.

Every transition is a pure function taking the old State and returning a new
one; Calculator threads a State through them for a UI to drive.
'''

from collections import namedtuple
import logging

from .machine import evaluate
from .tokens import OPERATORS
from .util import CalcError, ExpressionTooLong, InvalidExpression


logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')

ELLIPSIS = '...'
ERROR_PREFIX = 'Error: '
MIN_WIDTH = len(ELLIPSIS) + 1


class State(namedtuple('State', 'expression token pending error')):
    '''
    Snapshot of the calculator.

    :param expression: Infix text typed so far.
    :param token: Text of the number being typed, or the last result.
    :param pending: Next digit starts a new number.
    :param error: Reason of the last failure, None when there is none.
    '''
    __slots__ = ()

    @property
    def failed(self):
        return self.error is not None


INITIAL = State(expression='', token='0', pending=False, error=None)


def _failed(error):
    '''
    Error state for a CalcError: empty buffers carrying its reason.
    '''
    logger.info('Calculator error: %s', error.reason)
    return INITIAL._replace(error=error.reason)


def _ends_with_operator(expression):
    return bool(expression) and expression[-1] in OPERATORS


def _ends_with_lone_zero(expression):
    '''
    True if the expression ends in a zero that is a whole number by itself.
    '''
    return expression.endswith('0') and \
        (len(expression) == 1 or expression[-2] in OPERATORS)


def on_digit(state, digit, max_length=1000):
    if digit not in DIGITS:
        raise ValueError('not a digit: {!r}'.format(digit))
    if state.failed:
        return INITIAL._replace(expression=digit, token=digit)
    if state.pending:
        token = digit
        if not state.expression or _ends_with_operator(state.expression):
            expression = state.expression + digit
        else:
            # Last result is being replaced by a new number.
            expression = digit
    elif state.token.lstrip('-') == '0':
        token = state.token[:-1] + digit
        if _ends_with_lone_zero(state.expression):
            expression = state.expression[:-1] + digit
        else:
            expression = state.expression + digit
    else:
        token = state.token + digit
        expression = state.expression + digit
    if len(expression) > max_length:
        return _failed(ExpressionTooLong('expression too long'))
    return State(expression=expression, token=token, pending=False,
                 error=None)


def on_operator(state, op, max_length=1000):
    if op not in OPERATORS:
        raise ValueError('not an operator: {!r}'.format(op))
    if state.failed:
        return state
    if not state.expression:
        if op != '-':
            return state
        # Unary minus, the start of a negative number.
        return state._replace(expression=op, token=op, pending=False)
    if state.expression == '-':
        # A lone unary minus can't become a binary operator.
        return state
    if _ends_with_operator(state.expression):
        expression = state.expression[:-1] + op
    else:
        expression = state.expression + op
    if len(expression) > max_length:
        return _failed(ExpressionTooLong('expression too long'))
    return state._replace(expression=expression, pending=True)


def on_equals(state):
    if not state.expression or _ends_with_operator(state.expression):
        return _failed(InvalidExpression('invalid expression'))
    try:
        result = evaluate(state.expression)
    except CalcError as e:
        return _failed(e)
    logger.debug('%s = %s', state.expression, result)
    return State(expression=result, token=result, pending=True, error=None)


def on_clear(state):
    return INITIAL


def display(state, width=40):
    '''
    Text to show for state, cut to width with a trailing ellipsis.

    Width must leave room for at least one character before the ellipsis.
    '''
    if width < MIN_WIDTH:
        raise ValueError('display width below {}: {}'.format(MIN_WIDTH,
                                                             width))
    if state.failed:
        text = ERROR_PREFIX + state.error
    else:
        text = state.expression or state.token
    if len(text) > width:
        text = text[:width - len(ELLIPSIS)] + ELLIPSIS
    return text


class Calculator:
    '''
    Calculator driven by keypad events.

    Each event returns the new display text.
    '''

    MAX_EXPRESSION_LENGTH = 1000
    DISPLAY_WIDTH = 40

    def __init__(self, max_length=None, width=None):
        '''
        Create calculator in its initial state.

        :param max_length: Longest expression accepted, in characters.
        :param width: Display width, in characters.
        '''
        if max_length is None:
            max_length = type(self).MAX_EXPRESSION_LENGTH
        if width is None:
            width = type(self).DISPLAY_WIDTH
        if max_length < 1:
            raise ValueError('expression length below 1: {}'.format(
                max_length))
        if width < MIN_WIDTH:
            raise ValueError('display width below {}: {}'.format(MIN_WIDTH,
                                                                 width))
        self.state = INITIAL
        self.max_length = max_length
        self.width = width

    def _transition(self, state):
        self.state = state
        return self.current_display()

    def on_digit(self, digit):
        logger.debug('Digit: %s', digit)
        return self._transition(on_digit(self.state, digit,
                                         max_length=self.max_length))

    def on_operator(self, op):
        logger.debug('Operator: %s', op)
        return self._transition(on_operator(self.state, op,
                                            max_length=self.max_length))

    def on_equals(self):
        logger.debug('Equals, expression = %r', self.state.expression)
        return self._transition(on_equals(self.state))

    def on_clear(self):
        logger.debug('Clear')
        return self._transition(on_clear(self.state))

    def current_display(self):
        return display(self.state, width=self.width)

    def press(self, key):
        '''
        Send the event for one keypad key.

        Digits, + - * /, = for equals and c or C for clear. Whitespace is
        ignored.
        '''
        if key in DIGITS:
            return self.on_digit(key)
        elif key in OPERATORS:
            return self.on_operator(key)
        elif key == '=':
            return self.on_equals()
        elif key in {'c', 'C'}:
            return self.on_clear()
        elif key.isspace():
            return self.current_display()
        raise CalcError('unknown key {!r}'.format(key))

    def feed(self, keys):
        '''
        Press every key in keys, returning the final display.
        '''
        for key in keys:
            self.press(key)
        return self.current_display()
