'''
Script files: one statement per line, saved as ``<name>.smp``.
'''

from os import makedirs, path
import sys
import traceback

from .interpreter import Interpreter
from .util import LexError, SMEPError, wrap_user_errors


SCRIPT_DIR = 'scripts'
SCRIPT_SUFFIX = '.smp'
END = 'end'


def script_path(name, directory=SCRIPT_DIR):
    '''
    Return the file a script name refers to.

    Existing files and names with a directory or suffix are taken as paths.
    '''
    if path.exists(name) or path.dirname(name) or name.endswith(SCRIPT_SUFFIX):
        return name
    return path.join(directory, name + SCRIPT_SUFFIX)


def create_script(name, lines, directory=SCRIPT_DIR):
    '''
    Save lines to a new script until a line reading ``end``.

    Creates the script directory if needed. Returns the script's path.
    '''
    name = name.strip()
    if not name:
        raise SMEPError('Script name must not be empty')
    makedirs(directory, exist_ok=True)
    filename = path.join(directory, name + SCRIPT_SUFFIX)
    try:
        with open(filename, 'w') as script:
            for line in lines:
                line = line.rstrip('\n')
                if line == END:
                    break
                print(line, file=script)
    except OSError as e:
        raise SMEPError('Failed to create script file {}'.format(
            filename)) from e
    return filename


class ScriptRunner:
    '''
    Runs statements line by line, reporting and skipping bad lines.
    '''

    def __init__(self, interpreter=None, verbose=False):
        '''
        :param interpreter: Interpreter whose store the script shares.
        :param verbose: Show stack traces of failed lines.
        '''
        self.interpreter = Interpreter() if interpreter is None else interpreter
        self.verbose = verbose

    def run(self, lines):
        '''
        Run every line, printing results. Return the number of failed lines.
        '''
        failures = 0
        for lineno, line in enumerate(lines, start=1):
            try:
                output = self.interpreter.execute(self._text(line))
            except SMEPError as e:
                failures += 1
                self.report(e, lineno)
                continue
            if output is not None:
                print(output)
        return failures

    def run_file(self, filename):
        '''
        Run a script file. Return the number of failed lines.
        '''
        try:
            script = open(filename, 'rb')
        except OSError as e:
            raise SMEPError('Could not open the script file {}'.format(
                filename)) from e
        with script:
            return self.run(script)

    @wrap_user_errors('Line is not valid UTF-8', error=LexError)
    def _text(self, line):
        '''
        Return line as text, decoding raw file lines.
        '''
        if isinstance(line, bytes):
            return line.decode('utf-8')
        return line

    def report(self, error, lineno):
        if self.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__, file=sys.stderr)
        print('Error in script execution: line {}: {}'.format(
            lineno, error.args[0]), file=sys.stderr)
