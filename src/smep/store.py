from .token import is_valid_variable_name
from .util import SMEPError, UndefinedVariable


class VariableStore:
    '''
    Named registers holding the last number assigned to each name.

    Names are case sensitive. Values are never removed; the store lives as
    long as the interpreter owning it.
    '''

    def __init__(self):
        self.registers = dict()

    def set(self, name, value):
        '''
        Store value into variable, replacing any previous value.
        '''
        if not is_valid_variable_name(name):
            raise SMEPError('Invalid variable name {}'.format(repr(name)))
        self.registers[name] = float(value)

    def get(self, name):
        '''
        Return the value of a variable.
        '''
        try:
            return self.registers[name]
        except KeyError:
            raise UndefinedVariable(name) from None

    def __contains__(self, name):
        return name in self.registers

    def __iter__(self):
        return iter(self.registers.items())

    def __len__(self):
        return len(self.registers)
