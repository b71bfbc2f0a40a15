'''
Function table tests
'''

import math

import regex

from smep.functions import Function, FunctionTable, default_functions
from smep.util import ArityError, MathError, SMEPError, UnknownFunction

from pytest import raises


def test_register_and_call():
    table = FunctionTable()
    table.register('add3', lambda a, b, c: a + b + c)
    assert table['add3'].arity == 3
    assert table.call('add3', [1, 2, 3.5]) == 6.5


def test_register_decorator():
    table = FunctionTable()

    @table.register('twice')
    def twice(x):
        return 2 * x

    assert twice(2) == 4
    assert table.call('twice', [4]) == 8


def test_explicit_arity():
    table = FunctionTable()
    table.register('first', lambda *args: args[0], arity=1)
    assert table.call('first', [7]) == 7


def test_defaults_not_counted():
    table = FunctionTable()
    table.register('scale', lambda x, factor=10: x * factor)
    assert table['scale'].arity == 1


def test_booleans_become_numbers():
    table = FunctionTable()
    table.register('add', lambda a, b: a + b)
    assert table.call('add', [True, 2]) == 3.0


def test_wrong_arity():
    f = Function('neg', 1, lambda x: -x)
    with raises(ArityError, match=regex.escape(
            'Incorrect number of arguments.')):
        f(1, 2)


def test_bad_argument():
    f = Function('neg', 1, lambda x: -x)
    with raises(SMEPError):
        f('1')


def test_unknown_function():
    with raises(UnknownFunction, match='Function not found: nope'):
        FunctionTable().call('nope', [])


def test_body_errors_are_user_errors():
    with raises(MathError, match='Cannot evaluate sqrt'):
        default_functions().call('sqrt', [-1])


def test_defaults():
    table = default_functions()
    assert 'hypot' in table
    assert table.call('hypot', [3, 4]) == 5
    assert table.call('max', [3, 4]) == 4
    assert table.call('cos', [0]) == 1
    assert math.isclose(table.call('log', [math.e]), 1)


def test_replace():
    table = FunctionTable()
    table.register('f', lambda: 1)
    table.register('f', lambda x: x)
    assert len(table) == 1
    assert table['f'].arity == 1
