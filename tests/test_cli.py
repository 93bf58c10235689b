import pytest

from drillbox import arithmetic, patterns
from drillbox.cli import main


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.parametrize(
    "option,symbol,title",
    [
        (1, "+", "Addition (integer)"),
        (2, "-", "Subtraction (integer)"),
        (3, "x", "Multiplication (integer)"),
    ],
)
def test_calc_with_values(capsys, option, symbol, title):
    code = main(["calc", str(option), "6", "3"])
    out = capsys.readouterr().out
    assert code == 0
    expected = arithmetic.calculate(option, 6, 3)
    assert out == f"\t{title}:\n\t6 {symbol} 3 = {expected}\n"


def test_calc_division_shows_two_decimals(capsys):
    assert main(["calc", "4", "7", "2"]) == 0
    out = capsys.readouterr().out
    assert "\tDivision (integer, without truncation):" in out
    assert "\t7 / 2 = 3.50" in out


def test_calc_division_by_zero(capsys):
    assert main(["calc", "4", "7", "0"]) == 1
    assert "Error: Division by zero is not allowed." in capsys.readouterr().out


def test_calc_incorrect_option(capsys):
    assert main(["calc", "9", "1", "1"]) == 1
    assert "Error: Incorrect option." in capsys.readouterr().out


def test_calc_wrong_number_of_values():
    with pytest.raises(SystemExit) as excinfo:
        main(["calc", "1", "2"])
    assert excinfo.value.code == 2


def test_calc_interactive(monkeypatch, capsys):
    _feed(monkeypatch, ["3", "4", "5"])
    assert main(["calc"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("-- SIMPLE CALCULATOR --\n1. Addition\n")
    assert "Enter the option (1-4) or (0) to stop: " in out
    assert f"\t4 x 5 = {arithmetic.calculate(3, 4, 5)}" in out


def test_calc_interactive_exit(monkeypatch, capsys):
    _feed(monkeypatch, ["0"])
    assert main(["calc"]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Exiting...")


def test_calc_interactive_bad_option(monkeypatch, capsys):
    _feed(monkeypatch, ["7"])
    assert main(["calc"]) == 1
    assert "Error: Incorrect option." in capsys.readouterr().out


def test_pattern_with_height(capsys):
    assert main(["pattern", "pyramid-symbol", "4"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == patterns.pyramid_symbol(4)


@pytest.mark.parametrize("kind", ["hollow-pyramid", "pascal-diamond", "half-pyramid-numbers"])
def test_pattern_kinds(capsys, kind):
    assert main(["pattern", kind, "5"]) == 0
    lines = capsys.readouterr().out.split("\n")[:-1]
    function = getattr(patterns, kind.replace("-", "_"))
    assert lines == function(5)


def test_pattern_interactive(monkeypatch, capsys):
    _feed(monkeypatch, ["3"])
    assert main(["pattern", "pyramid-symbol"]) == 0
    out = capsys.readouterr().out
    assert out == "Enter the height: \n" + "".join(
        line + "\n" for line in patterns.pyramid_symbol(3)
    )


def test_unknown_pattern_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["pattern", "spiral", "3"])
    assert excinfo.value.code == 2


def test_events_menu_delegation(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, ["5"])
    assert main(["events", "--file", str(tmp_path / "records.txt")]) == 0
    assert "EXITING!!!" in capsys.readouterr().out


def test_shop_menu_delegation(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, ["0"])
    code = main(
        [
            "shop",
            "--products",
            str(tmp_path / "p.txt"),
            "--history",
            str(tmp_path / "h.txt"),
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "========= MENU =========" in out
    assert "EXITING!!!" in out