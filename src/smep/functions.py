'''
Named functions of fixed arity, callable with numbers or booleans.

Kept apart from expressions: the expression grammar has no call syntax.
'''

from inspect import signature as getsignature, Parameter
from numbers import Real
import math

from .util import (ArityError, MathError, SMEPError, UnknownFunction,
                   wrap_user_errors)


def _arity(f):
    '''
    Return number of non-default positional arguments.
    '''
    parameters = getsignature(f).parameters.values()
    positionals = [parameter
                   for parameter
                   in parameters
                   if parameter.kind in (Parameter.POSITIONAL_ONLY,
                                         Parameter.POSITIONAL_OR_KEYWORD) and
                      parameter.default == Parameter.empty]
    return len(positionals)


def _coerce(arg):
    # bool is a Real too
    if not isinstance(arg, Real):
        raise SMEPError('Function arguments must be numbers or booleans, '
                        'not {}'.format(repr(arg)))
    return float(arg)


class Function:
    '''
    Callable checking its argument count before running its body.
    '''

    def __init__(self, name, arity, body):
        if arity < 0:
            raise ValueError('Negative arity for {}'.format(name))
        self.name = name
        self.arity = arity
        self.body = body

    def __call__(self, *args):
        if len(args) != self.arity:
            raise ArityError('Incorrect number of arguments. '
                             '{} takes {}, got {}'.format(
                                 self.name, self.arity, len(args)))
        return self._run(*map(_coerce, args))

    @wrap_user_errors('Cannot evaluate {0.name}', error=MathError)
    def _run(self, *args):
        return self.body(*args)

    def __repr__(self):
        return 'Function({!r}, {})'.format(self.name, self.arity)


class FunctionTable:
    '''
    Registry of Functions by name.
    '''

    def __init__(self):
        self.functions = dict()

    def register(self, name, body=None, arity=None):
        '''
        Register body under name. Without a body, return a decorator.

        :param arity: Argument count, read from body's signature if None.
        '''
        if body is None:
            def decorator(f):
                self.register(name, f, arity)
                return f
            return decorator
        if arity is None:
            arity = _arity(body)
        self.functions[name] = Function(name, arity, body)
        return self.functions[name]

    def call(self, name, args):
        try:
            function = self.functions[name]
        except KeyError:
            raise UnknownFunction('Function not found: {}'.format(
                name)) from None
        return function(*args)

    def __contains__(self, name):
        return name in self.functions

    def __getitem__(self, name):
        return self.functions[name]

    def __iter__(self):
        return iter(sorted(self.functions))

    def __len__(self):
        return len(self.functions)


def default_functions():
    '''
    Return a table of the usual math functions.
    '''
    table = FunctionTable()
    for name, f, arity in [('sqrt', math.sqrt, 1),
                           ('sin', math.sin, 1),
                           ('cos', math.cos, 1),
                           ('tan', math.tan, 1),
                           ('log', math.log, 1),
                           ('exp', math.exp, 1),
                           ('abs', abs, 1),
                           ('floor', math.floor, 1),
                           ('ceil', math.ceil, 1),
                           ('hypot', math.hypot, 2),
                           ('pow', math.pow, 2),
                           ('max', max, 2),
                           ('min', min, 2)]:
        # Signatures of builtins are unreliable, so spell the arity out.
        table.register(name, f, arity)
    return table
