'''
Shell and command line tests
'''

import os

from smep.cli import CLI, Shell
from smep.interpreter import Interpreter

from pytest import fixture, raises


@fixture
def shell(interpreter, scripts_dir):
    return Shell(interpreter, scripts_dir=scripts_dir)


def test_expressions(shell, capsys):
    shell.run(['3+4*2\n', '(3 + 4) * 2\n', '\n'])
    assert capsys.readouterr().out == 'Result: 11\nResult: 14\n'


def test_errors_do_not_end_loop(shell, capsys):
    shell.run(['5/0', 'p nothing', '2^3'])
    captured = capsys.readouterr()
    assert captured.out == 'Result: 8\n'
    assert captured.err == ('Error: Division by zero\n'
                            'Error: Undefined variable nothing\n')


def test_exit(shell, capsys):
    shell.run(['1', 'exit', '2'])
    assert capsys.readouterr().out == 'Result: 1\n'


def test_variables(shell, capsys):
    shell.run(['= x 2', 'y = x * 3', 'vars', 'p y'])
    assert capsys.readouterr().out == 'x = 2\ny = 6\nx = 2\ny = 6\n6\n'


def test_help_and_version(shell, capsys):
    shell.run(['help', 'version'])
    out = capsys.readouterr().out
    assert out.startswith('-----HELP-----\n')
    assert 'hypot' in out
    assert 'SMEP version ' in out


def test_write_and_run_script(shell, scripts_dir, capsys):
    shell.run(['script', 'sq', '= s n * n', 'p s', 'end',
               '= n 7', 'run sq', 's + 1'])
    out = capsys.readouterr().out
    filename = os.path.join(scripts_dir, 'sq.smp')
    assert os.path.exists(filename)
    assert out == ('Script saved to {}\n'
                   'n = 7\n'
                   's = 49\n'
                   '49\n'
                   'Result: 50\n').format(filename)


def test_run_missing_script(shell, capsys):
    shell.run(['run nope'])
    assert capsys.readouterr().err.startswith(
        'Error: Could not open the script file')


def test_call(shell, capsys):
    shell.run(['call hypot 3 4', 'call max true 0.5', 'call hypot 3',
               'call nope 1', 'call sqrt x'])
    captured = capsys.readouterr()
    assert captured.out == 'Result: 5\nResult: 1\n'
    assert captured.err.splitlines() == [
        'Error: Incorrect number of arguments. hypot takes 2, got 1',
        'Error: Function not found: nope',
        "Error: Bad argument 'x'",
    ]


def test_cli_expressions(capsys):
    assert CLI().run(args=['-e', '= a 4', 'a ^ 0.5']) == 0
    assert capsys.readouterr().out == 'a = 4\nResult: 2\n'


def test_cli_precision(capsys):
    CLI().run(args=['-k', '3', '-e', '1/3'])
    assert capsys.readouterr().out == 'Result: 0.333\n'


def test_cli_scripts(tmp_path, capsys):
    good = tmp_path / 'good.smp'
    good.write_text('= a 1\n')
    bad = tmp_path / 'bad.smp'
    bad.write_text('p a\n1 / 0\n')
    assert CLI().run(args=['-s', str(good)]) == 0
    assert CLI().run(args=['-s', str(good), str(bad)]) == 1
    captured = capsys.readouterr()
    assert captured.out == 'a = 1\na = 1\n1\n'
    assert captured.err == ('Error in script execution: line 2: '
                            'Division by zero\n')


def test_shell_default_interpreter():
    shell = Shell()
    assert isinstance(shell.interpreter, Interpreter)
    assert len(shell.interpreter.store) == 0


def test_run_undecodable_script(shell, tmp_path, capsys):
    script = tmp_path / 'bad.smp'
    script.write_bytes(b'= a 1\n\xff\xfe 2\n= b 3\n')
    shell.run(['run {}'.format(script), '1 + 1'])
    captured = capsys.readouterr()
    assert captured.out == 'a = 1\nb = 3\nResult: 2\n'
    assert 'Line is not valid UTF-8' in captured.err


def test_exponent_at_prompt(shell, capsys):
    shell.run(['1e3+1', '2.5E-1*4'])
    captured = capsys.readouterr()
    assert captured.out == 'Result: 1001\nResult: 1\n'
    assert captured.err == ''


def test_command_names_assignable(shell, capsys):
    shell.run(['run = 5', 'call = run * 2', 'p call'])
    assert capsys.readouterr().out == 'run = 5\ncall = 10\n10\n'


def test_cli_negative_precision(capsys):
    with raises(SystemExit) as info:
        CLI().run(args=['-k', '-1', '-e', '1/3'])
    assert info.value.code == 2
    assert 'precision must not be negative' in capsys.readouterr().err
