from functools import wraps


class SMEPError(Exception):
    '''
    Base class of every error reported to the user.

    The message is always ``args[0]``.
    '''


class LexError(SMEPError):
    pass


class ParseError(SMEPError):
    '''
    Structurally malformed input: unbalanced parentheses, missing operands,
    leftover values, bad statements.
    '''


class MathError(SMEPError):
    pass


class DivisionByZero(MathError):
    pass


class UnknownOperator(MathError):
    pass


class UndefinedVariable(SMEPError):
    def __init__(self, name):
        super().__init__('Undefined variable {}'.format(name))
        self.name = name


class ArityError(SMEPError):
    pass


class UnknownFunction(SMEPError):
    pass


def wrap_user_errors(fmt, error=SMEPError):
    '''
    Decorator that converts unexpected exceptions to user errors.

    Passes through SMEPErrors. Anything else is re-raised as ``error``, with
    ``fmt`` formatted against the positional arguments of the call.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except SMEPError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def format_number(value, precision=None):
    '''
    Format a number the way C's ``%g`` does.

    :param precision: Significant digits, six when None.
    '''
    if precision is None:
        return format(value, 'g')
    return format(value, '.{}g'.format(precision))
