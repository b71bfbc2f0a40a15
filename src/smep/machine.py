from collections import deque
import math
import operator

from .token import Number, Operator, Parenthesis, Variable
from .util import (DivisionByZero, MathError, ParseError, UnknownOperator,
                   wrap_user_errors)


def _divide(left, right):
    if right == 0:
        raise DivisionByZero('Division by zero')
    return left / right


# Binary operators on the items of a machine.
BUILTINS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': _divide,
    '^': math.pow,
}


@wrap_user_errors('Cannot evaluate {0:g} {2} {1:g}', error=MathError)
def apply_operator(left, right, symbol):
    '''
    Return ``left symbol right``.
    '''
    try:
        f = BUILTINS[symbol]
    except KeyError:
        raise UnknownOperator('Unknown operator {}'.format(symbol)) from None
    return f(left, right)


class Machine:
    '''
    Arithmetic stack machine.

    Runs postfix token sequences. Holds no state between evaluations.
    '''

    def evaluate(self, postfix):
        '''
        Run a postfix token sequence and return the single resulting number.
        '''
        stack = deque()
        for token in postfix:
            if isinstance(token, Number):
                stack.append(token.value)
            elif isinstance(token, Operator):
                # Topmost is the right hand operand: 9 2 ^ is 9 ** 2.
                right, left = self._popstack(stack, token.symbol)
                stack.append(apply_operator(left, right, token.symbol))
            elif isinstance(token, (Parenthesis, Variable)):
                raise ParseError('Malformed expression: unexpected {}'.format(
                    token))
            else:
                raise TypeError('Not a token: {!r}'.format(token))

        if not stack:
            raise ParseError('Malformed expression: nothing to evaluate')
        if len(stack) > 1:
            raise ParseError(
                'Malformed expression: {} values left over'.format(len(stack)))
        return stack.pop()

    def _popstack(self, stack, symbol, n=2):
        '''
        Pop operands for ``symbol`` from stack, topmost first.
        '''
        if len(stack) < n:
            raise ParseError(
                'Malformed expression: {} needs {} operands'.format(symbol, n))
        return [stack.pop() for _ in range(n)]
