from os import isatty, path
from argparse import (ArgumentParser, ArgumentTypeError, REMAINDER,
                      OPTIONAL)
from importlib.metadata import version, PackageNotFoundError
import sys
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .functions import default_functions
from .interpreter import Interpreter
from .script import SCRIPT_DIR, ScriptRunner, create_script, script_path
from .util import LexError, SMEPError, format_number, wrap_user_errors


def precision(text):
    '''
    Significant digit count, zero or more.
    '''
    digits = int(text)
    if digits < 0:
        raise ArgumentTypeError('precision must not be negative')
    return digits


def get_version():
    try:
        return version('smep')
    except PackageNotFoundError:
        return 'unknown'


class InteractiveInput:
    '''
    Line source reading from the terminal, with editing and history.

    The prompt may be changed between lines.
    '''

    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(mouse_support=False,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self.history,
                                    erase_when_done=False)
            while True:
                yield session.prompt(self.prompt)
        except EOFError:
            return


class Shell:
    '''
    Read-evaluate-print loop over a line source.

    Understands a handful of commands; every other line is evaluated.
    '''

    BANNER = ('Welcome to SMEP, the simplest math evaluation program.\n'
              'Enter an expression (type help to see the instructions).')
    HELP = '''\
-----HELP-----
Supported mathematical symbols: +, -, *, /, ^, ( and )
Assign a variable with '= name expression' or 'name = expression'
Print a variable with 'p name'
Operators and names must be separated by spaces when using variables
Commands:
  script            write a new script, ending it with 'end'
  run NAME          run a saved script
  vars              list assigned variables
  call NAME ARGS    call a function ({functions})
  version           show the program version
  exit              leave the program'''
    SCRIPT_NAME_PROMPT = 'Enter script name: '
    SCRIPT_PROMPT = '>> '

    def __init__(self, interpreter=None, functions=None,
                 scripts_dir=SCRIPT_DIR, verbose=False):
        '''
        :param interpreter: Interpreter, sharing its variables with scripts.
        :param functions: FunctionTable for the call command.
        :param scripts_dir: Where scripts are saved and looked up.
        :param verbose: Show stack traces on bad input.
        '''
        self.interpreter = Interpreter() if interpreter is None else interpreter
        self.functions = default_functions() if functions is None else functions
        self.scripts_dir = scripts_dir
        self.verbose = verbose
        self.commands = {
            'help': self.printhelp,
            'version': self.printversion,
            'script': self.write_script,
            'vars': self.printvars,
        }
        # Commands taking arguments
        self.arg_commands = {
            'run': self.run_script,
            'call': self.call,
        }

    def run(self, source, prompt=None):
        '''
        Feed every line from source until it ends or says ``exit``.
        '''
        self.source = source
        self.lines = iter(source)
        self.prompt = prompt
        while True:
            line = self._readline(self.prompt)
            if line is None or line.strip() == 'exit':
                break
            self.feed(line)

    def _readline(self, prompt):
        '''
        Return the next line from the source, or None once exhausted.
        '''
        if isinstance(self.source, InteractiveInput) and prompt is not None:
            self.source.prompt = prompt
        line = next(self.lines, None)
        if line is None:
            return None
        return line.rstrip('\n')

    def feed(self, line):
        '''
        Run a command or evaluate a line, reporting errors.
        '''
        words = line.split()
        if not words:
            return
        try:
            if len(words) == 1 and words[0] in self.commands:
                self.commands[words[0]]()
            elif (len(words) > 1 and words[0] in self.arg_commands and
                  words[1] != '='):
                self.arg_commands[words[0]](*words[1:])
            else:
                output = self.interpreter.calculate(line)
                if output is not None:
                    print(output)
        except SMEPError as e:
            self.report(e)

    def report(self, error):
        if self.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__, file=sys.stderr)
        print('Error:', error.args[0], file=sys.stderr)

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print(self.HELP.format(functions=', '.join(self.functions)))

    def printversion(self):
        print('SMEP version {}'.format(get_version()))

    def printvars(self):
        '''
        Print every assigned variable, oldest first.
        '''
        for name, value in self.interpreter.store:
            print('{} = {}'.format(name, self.interpreter.format(value)))

    def write_script(self):
        '''
        Ask for a name, then save lines until ``end``.
        '''
        name = self._readline(self.SCRIPT_NAME_PROMPT)
        if name is None:
            return
        filename = create_script(name, self._script_lines(), self.scripts_dir)
        print('Script saved to', filename)

    def _script_lines(self):
        while True:
            line = self._readline(self.SCRIPT_PROMPT)
            if line is None:
                return
            yield line

    def run_script(self, *names):
        '''
        Run saved scripts with the shell's variables.
        '''
        runner = ScriptRunner(self.interpreter, verbose=self.verbose)
        for name in names:
            runner.run_file(script_path(name, self.scripts_dir))

    def call(self, name, *words):
        '''
        Call a registered function with number or boolean arguments.
        '''
        args = [self._argument(word) for word in words]
        result = self.functions.call(name, args)
        print('Result: {}'.format(format_number(result,
                                                self.interpreter.precision)))

    @wrap_user_errors('Bad argument {1!r}', error=LexError)
    def _argument(self, word):
        if word in ('true', 'false'):
            return word == 'true'
        return float(word)


class CLI:
    '''
    Command line interface to SMEP.
    '''

    DEFAULT_PROMPT = 'SIC> '
    HISTORY_FILE = '~/.smep_history'

    def executor(self):
        '''
        Run the interactive shell (or over piped/given lines).
        '''
        shell = Shell(self.interpreter,
                      scripts_dir=self.args.scripts_dir,
                      verbose=self.args.verbose)
        interactive = self._interactive()
        if interactive:
            print(shell.BANNER)
        shell.run(self.args.expressions,
                  prompt=self.args.expressions.prompt if interactive else None)
        return 0

    def script_runner(self):
        '''
        Run every script given on the command line, in one variable scope.
        '''
        runner = ScriptRunner(self.interpreter, verbose=self.args.verbose)
        failures = 0
        for name in self.args.scripts:
            try:
                failures += runner.run_file(
                    script_path(name, self.args.scripts_dir))
            except SMEPError as e:
                failures += 1
                print('Error:', e.args[0], file=sys.stderr)
        return 1 if failures else 0

    def _prompting_input(self):
        '''
        Return prompting input, or plain stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(
                prompt=self.args.prompt or self.DEFAULT_PROMPT,
                history=FileHistory(path.expanduser(self.HISTORY_FILE)))
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Simplest math evaluation program')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-V', '--version',
                                          action='version',
                                          version=get_version())
        self.argument_parser.add_argument('-d', '--scripts-dir',
                                          default=SCRIPT_DIR)
        self.argument_parser.add_argument('-k', '--precision',
                                          type=precision,
                                          help='significant digits shown')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        main_groups.add_argument('-e', '--expression',
                                 nargs=REMAINDER,
                                 dest='expressions')
        main_groups.add_argument('-p', '--prompt',
                                 nargs=OPTIONAL,
                                 const=self.DEFAULT_PROMPT)
        main_groups.add_argument('-s', '--script',
                                 nargs='+',
                                 dest='scripts')
        self.argument_parser.set_defaults(expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Returns the exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.interpreter = Interpreter(precision=self.args.precision)
        if self.args.scripts:
            action = self.script_runner
        else:
            action = self.executor
            if self.args.expressions is None:
                self.args.expressions = self._prompting_input()
        try:
            return action()
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
