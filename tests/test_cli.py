import json

import pytest

from denominal.cli import main


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


CLI_TALES = [
    (("85703", "-s", "time"), "23 hours, 48 minutes, and 23 seconds\n"),
    (("-3661", "-s", "time"), "1 hour, 1 minute, and 1 second\n"),
    (("0", "-s", "time"), "\n"),
    (("32223", "second", "60", "minute", "60", "hour"), "8 hours, 57 minutes, and 3 seconds\n"),
    (("26", "inch/inches", "12", "foot/feet"), "2 feet and 2 inches\n"),
    (("32223", "-r", "100,100"), "3 22 23\n"),
    (("32223", "-s", "time", "-f", "list"), "8 57 3\n"),
    (("1_000", "-s", "weight"), "1 kilogram\n"),
]


@pytest.mark.parametrize("argv, expected", CLI_TALES)
def test_cli(capsys, argv, expected):
    code, out, _ = run(capsys, *argv)
    assert code == 0
    assert out == expected


def test_dict_output_is_json(capsys):
    code, out, _ = run(capsys, "85703", "-s", "time", "-f", "dict")
    assert code == 0
    assert json.loads(out) == {"hour": 23, "minute": 48, "second": 23}


def test_explain(capsys):
    code, out, _ = run(capsys, "3661", "-s", "time", "--explain")
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "week(÷604800): 3661 -> 0 (remaining 3661)"
    assert len(lines) == 6
    assert lines[-1] == "1 hour, 1 minute, and 1 second"


def test_shortcuts_listing(capsys):
    code, out, _ = run(capsys, "--shortcuts")
    assert code == 0
    assert "time: second, minute, hour, day, week" in out.splitlines()
    assert "length_imperial: inch, foot, yard, mile" in out.splitlines()
    assert len(out.splitlines()) == 10


def test_unknown_shortcut_exits_2(capsys):
    code, out, err = run(capsys, "5", "-s", "bogus")
    assert code == 2
    assert out == ""
    assert "Unknown unit shortcut 'bogus'" in err


def test_invalid_denomination_exits_2(capsys):
    code, out, err = run(capsys, "5", "second", "60")
    assert code == 2
    assert "end on a unit" in err


@pytest.mark.parametrize("argv", [
    ("5",),
    ("5", "-s", "time", "-r", "60"),
    ("-s", "time"),
    ("five", "-s", "time"),
    ("5", "-r", "60,x"),
])
def test_usage_errors(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        main(list(argv))
    assert exc.value.code == 2
