from pytest import fixture

from smep.interpreter import Interpreter
from smep.script import ScriptRunner
from smep.store import VariableStore


@fixture
def store():
    return VariableStore()


@fixture
def interpreter(store):
    return Interpreter(store)


@fixture
def runner(interpreter):
    '''
    Script runner sharing the interpreter (and store) fixtures.
    '''
    return ScriptRunner(interpreter)


@fixture
def scripts_dir(tmp_path):
    return str(tmp_path / 'scripts')
