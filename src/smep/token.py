'''
Lexical units of the expression language.

A token is exactly one of four shapes: Number, Operator, Parenthesis or
Variable. Consumers dispatch on the concrete class, and must reject anything
they do not expect rather than guessing.
'''


OPERATORS = frozenset('+-*/^=')
PARENTHESES = frozenset('()')

# Binding strength of operators. Anything else binds weakest.
PRECEDENCE = {
    '^': 3,
    '*': 2,
    '/': 2,
    '+': 1,
    '-': 1,
}


def precedence(symbol):
    return PRECEDENCE.get(symbol, 0)


class Token:
    '''
    Immutable single-payload token.

    Only equal to tokens of the very same shape carrying the same payload.
    '''
    __slots__ = ('_payload',)

    def __init__(self, payload):
        object.__setattr__(self, '_payload', payload)

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self):
        return hash((type(self), self._payload))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._payload)

    def __str__(self):
        return str(self._payload)


class Number(Token):
    __slots__ = ()

    def __init__(self, value):
        super().__init__(float(value))

    @property
    def value(self):
        return self._payload

    def __str__(self):
        return format(self._payload, 'g')


class Operator(Token):
    __slots__ = ()

    def __init__(self, symbol):
        if symbol not in OPERATORS:
            raise ValueError('Not an operator: {!r}'.format(symbol))
        super().__init__(symbol)

    @property
    def symbol(self):
        return self._payload

    @property
    def precedence(self):
        return precedence(self._payload)


class Parenthesis(Token):
    __slots__ = ()

    def __init__(self, symbol):
        if symbol not in PARENTHESES:
            raise ValueError('Not a parenthesis: {!r}'.format(symbol))
        super().__init__(symbol)

    @property
    def symbol(self):
        return self._payload

    @property
    def opening(self):
        return self._payload == '('


class Variable(Token):
    __slots__ = ()

    def __init__(self, name):
        if not is_valid_variable_name(name):
            raise ValueError('Not a variable name: {!r}'.format(name))
        super().__init__(name)

    @property
    def name(self):
        return self._payload


def is_valid_variable_name(name):
    return bool(name) and name[0].isalpha()
