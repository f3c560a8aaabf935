'''
Command line tests
'''

from infixcalc.cli import CLI

from pytest import raises


def test_expressions(capsys):
    CLI().run(args=['-e', '5+3=', '2*'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ['8', '2*']
    assert err == ''


def test_error_display(capsys):
    CLI().run(args=['-e', '5/0='])
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['Error: division by zero']


def test_unknown_key_aborts_line(capsys):
    CLI().run(args=['-e', '5x1', '2'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ['52']
    assert "unknown key 'x'" in err


def test_width(capsys):
    CLI().run(args=['-w', '5', '-e', '1234567'])
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['12...']


def test_prompt_and_expression_exclusive():
    with raises(SystemExit):
        CLI().run(args=['-p', '-e', '1'])


def test_width_too_small(capsys):
    with raises(SystemExit):
        CLI().run(args=['-w', '2', '-e', '1234567'])
    _, err = capsys.readouterr()
    assert 'width must be at least 4' in err
