'''
SMEP, the simplest math evaluation program.

Evaluates infix arithmetic (``+ - * / ^`` and parentheses) with the usual
precedence, and runs small line-oriented scripts that assign and print
variables. Not intended to be Turing-complete!

Expressions go through three stages: a lexer turns a line into tokens, a
shunting-yard converter reorders them into postfix, and a stack machine
evaluates the postfix. Scripts add a statement layer with a variable store
on top.
'''

from .cli import CLI, Shell
from .functions import Function, FunctionTable, default_functions
from .interpreter import Interpreter
from .lexer import Lexer, ScriptLexer
from .machine import Machine
from .parser import ShuntingYard
from .script import ScriptRunner
from .store import VariableStore


__all__ = ('Machine', 'Lexer', 'ScriptLexer', 'ShuntingYard',
           'VariableStore', 'Interpreter', 'ScriptRunner',
           'Function', 'FunctionTable', 'default_functions',
           'Shell', 'CLI')
