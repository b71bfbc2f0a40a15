'''
Statement layer on top of the expression pipeline.

A script line is one of three statements:

- ``= name expr...`` (or ``name = expr...``) assigns to a variable,
- ``p name`` prints a variable,
- anything else is an expression whose result is shown.

Expressions always go through the shunting-yard converter, so operator
precedence is the same in scripts as on the interactive prompt.
'''

from collections import namedtuple

import regex

from .lexer import Lexer, ScriptLexer
from .machine import Machine
from .parser import ShuntingYard
from .store import VariableStore
from .token import Number, Operator, Variable
from .util import ParseError, format_number


Assignment = namedtuple('Assignment', 'name expression')
Print = namedtuple('Print', 'name')
Expression = namedtuple('Expression', 'tokens')

PRINT_KEYWORD = 'p'

# Lines that need the statement grammar rather than the dense one. A letter
# right after a digit is a number's exponent, as in 1e3.
STATEMENT = regex.compile(r'(?<![\d.])\p{Alpha}|=')


def classify(tokens):
    '''
    Return the statement a script line's tokens form.
    '''
    tokens = list(tokens)
    assign = Operator('=')
    if tokens and tokens[0] == assign:
        if len(tokens) < 2 or not isinstance(tokens[1], Variable):
            raise ParseError('Assignment needs a variable name after =')
        return Assignment(tokens[1].name, _expression(tokens[2:]))
    if (len(tokens) >= 2 and isinstance(tokens[0], Variable) and
            tokens[1] == assign):
        return Assignment(tokens[0].name, _expression(tokens[2:]))
    if (len(tokens) == 2 and tokens[0] == Variable(PRINT_KEYWORD) and
            isinstance(tokens[1], Variable)):
        return Print(tokens[1].name)
    return Expression(tokens)


def _expression(tokens):
    if not tokens:
        raise ParseError('Assignment needs an expression')
    return tokens


def is_statement(line):
    '''
    Return True if line needs the statement grammar (names or assignment).
    '''
    return STATEMENT.search(line) is not None


class Interpreter:
    '''
    Evaluates expressions and runs statements against one variable store.
    '''
    DEFAULT_PRECISION = None

    def __init__(self, store=None, precision=DEFAULT_PRECISION):
        '''
        :param store: VariableStore to read and assign, a fresh one if None.
        :param precision: Significant digits shown in results.
        '''
        self.store = VariableStore() if store is None else store
        self.precision = precision
        self.lexer = Lexer()
        self.script_lexer = ScriptLexer()
        self.parser = ShuntingYard()
        self.machine = Machine()

    def evaluate(self, line):
        '''
        Evaluate a dense expression line and return its value.
        '''
        return self.evaluate_tokens(self.lexer.lex(line))

    def evaluate_tokens(self, tokens):
        '''
        Resolve variables, convert to postfix and evaluate.
        '''
        return self.machine.evaluate(self.parser.convert(self.resolve(tokens)))

    def resolve(self, tokens):
        '''
        Replace every Variable with the Number it holds.
        '''
        return [Number(self.store.get(token.name))
                if isinstance(token, Variable) else token
                for token in tokens]

    def execute(self, line):
        '''
        Run one script statement and return the text to show, if any.
        '''
        tokens = list(self.script_lexer.lex(line))
        if not tokens:
            return None
        statement = classify(tokens)
        if isinstance(statement, Assignment):
            value = self.evaluate_tokens(statement.expression)
            self.store.set(statement.name, value)
            return '{} = {}'.format(statement.name, self.format(value))
        elif isinstance(statement, Print):
            return self.format(self.store.get(statement.name))
        else:
            return 'Result: {}'.format(
                self.format(self.evaluate_tokens(statement.tokens)))

    def calculate(self, line):
        '''
        Run one interactive line, dense or statement, and return its text.
        '''
        if is_statement(line):
            return self.execute(line)
        tokens = list(self.lexer.lex(line))
        if not tokens:
            return None
        return 'Result: {}'.format(self.format(self.evaluate_tokens(tokens)))

    def format(self, value):
        return format_number(value, self.precision)
