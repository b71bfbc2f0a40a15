from collections import deque

from .token import Number, Operator, Parenthesis, Variable
from .util import ParseError


class ShuntingYard:
    '''
    Infix to postfix (RPN) converter.

    Same precedence operators are left associative, ``^`` included, so
    ``2 ^ 3 ^ 2`` is ``(2 ^ 3) ^ 2``.
    '''

    def convert(self, tokens):
        '''
        Return the postfix ordering of an infix token sequence.

        Variables must have been resolved to numbers beforehand.
        '''
        postfix = []
        operators = deque()
        for token in tokens:
            if isinstance(token, Number):
                postfix.append(token)
            elif isinstance(token, Operator):
                while (operators and
                       isinstance(operators[-1], Operator) and
                       operators[-1].precedence >= token.precedence):
                    postfix.append(operators.pop())
                operators.append(token)
            elif isinstance(token, Parenthesis):
                if token.opening:
                    operators.append(token)
                else:
                    self._close(operators, postfix)
            elif isinstance(token, Variable):
                raise ParseError('Unresolved variable {}'.format(token.name))
            else:
                raise TypeError('Not a token: {!r}'.format(token))

        while operators:
            top = operators.pop()
            if isinstance(top, Parenthesis):
                raise ParseError('Unbalanced parentheses')
            postfix.append(top)
        return postfix

    def _close(self, operators, postfix):
        '''
        Pop operators up to and including the matching opening parenthesis.
        '''
        while operators:
            top = operators.pop()
            if isinstance(top, Parenthesis):
                return
            postfix.append(top)
        raise ParseError('Unbalanced parentheses')
