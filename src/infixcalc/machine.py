'''
Evaluation pipeline: infix tokens to postfix, postfix to a value, value to
display text.
'''

from collections import deque
import logging
import math

from .lexer import tokenize
from .tokens import Number, Operator, Paren
from .util import EvalError


logger = logging.getLogger(__name__)

# Values this close to an integer are shown as that integer.
INTEGRAL_TOLERANCE = 1e-12
# Most fractional digits shown for anything else.
FRACTIONAL_DIGITS = 10


def to_postfix(tokens):
    '''
    Reorder infix tokens into postfix (shunting-yard).

    Operators of equal precedence bind left to right. Never fails; bad
    arrangements are left for the machine to reject.
    '''
    output = []
    stack = deque()
    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while stack and isinstance(stack[-1], Operator) and \
                    stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token is Paren.OPEN:
            stack.append(token)
        elif token is Paren.CLOSE:
            while stack and stack[-1] is not Paren.OPEN:
                output.append(stack.pop())
            # A missing '(' was already reported by the lexer.
            if stack:
                stack.pop()
    while stack:
        output.append(stack.pop())
    return output


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them.
    '''

    def __init__(self):
        self.stack = deque()

    def feed(self, token):
        '''
        Stack a number or apply an operator to the stack.
        '''
        if isinstance(token, Number):
            self._pshstack(token.value)
        elif isinstance(token, Operator):
            self._apply(token)

    def _apply(self, op):
        # Popped topmost first, so the right operand comes out first.
        right, left = self._popstack(2)
        if op is Operator.DIV and right == 0:
            raise EvalError('division by zero')
        self._pshstack(op(left, right))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise EvalError('insufficient operands')
        return [self.stack.pop() for _ in range(n)]

    def result(self):
        '''
        Return the single value left on the stack.
        '''
        if not self.stack:
            raise EvalError('no result')
        if len(self.stack) > 1:
            raise EvalError('extra operands')
        value = self.stack[-1]
        if not math.isfinite(value):
            raise EvalError('result out of range')
        return value


def eval_postfix(tokens):
    '''
    Reduce postfix tokens to a single float.
    '''
    machine = Machine()
    for token in tokens:
        machine.feed(token)
    return machine.result()


def format_result(value):
    '''
    Render a value for display.

    Integral values lose their fractional part; others keep at most
    FRACTIONAL_DIGITS digits, without trailing zeros. No grouping.
    '''
    if not math.isfinite(value):
        raise EvalError('result out of range')
    nearest = round(value)
    if abs(value - nearest) < INTEGRAL_TOLERANCE:
        return str(int(nearest))
    text = '{:.{}f}'.format(value, FRACTIONAL_DIGITS).rstrip('0').rstrip('.')
    if text == '-0':
        return '0'
    return text


def evaluate(text):
    '''
    Run an infix expression through the whole pipeline.

    Returns the display text of the result; raises CalcError.
    '''
    tokens = tokenize(text)
    postfix = to_postfix(tokens)
    logger.debug('Postfix of %r: %s', text, ' '.join(map(str, postfix)))
    return format_result(eval_postfix(postfix))
