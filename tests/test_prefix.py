import io

import pytest

from algolab.prefix import BoundedStack, evaluate_prefix, main, to_prefix


def test_stack_is_lifo():
    stack = BoundedStack(3)
    for value in (1, 2, 3):
        stack.push(value)
    assert len(stack) == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_stack_overflow():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push("b")
    with pytest.raises(OverflowError):
        stack.push("c")


def test_stack_underflow():
    with pytest.raises(IndexError):
        BoundedStack().pop()


def test_to_prefix_precedence():
    assert to_prefix("1+2*3") == "+ 1 * 2 3"


def test_to_prefix_parentheses():
    assert to_prefix("(1+2)*3") == "* + 1 2 3"


def test_to_prefix_leading_sign():
    assert to_prefix("-3+4") == "+ -3 4"


@pytest.mark.parametrize(
    "expression,expected",
    [
        ("1+2*3", 1 + 2 * 3),
        ("(1+2)*3", (1 + 2) * 3),
        ("1-2-3", 1 - 2 - 3),
        ("8/4/2", 8 / 4 / 2),
        ("2*-3", 2 * -3),
        ("3-(-2)", 3 - (-2)),
        ("1.5*2+0.25", 1.5 * 2 + 0.25),
        ("2^3^2", (2 ** 3) ** 2),
        ("2*3^2", 2 * 3 ** 2),
        (" 10 - 4 * (2 + 1) ", 10 - 4 * (2 + 1)),
    ],
)
def test_round_trip_evaluation(expression, expected):
    assert evaluate_prefix(to_prefix(expression)) == pytest.approx(expected)


@pytest.mark.parametrize("expression", ["(1+2", "1+2)", "1+a", "1.2.3+4"])
def test_to_prefix_rejects_bad_input(expression):
    with pytest.raises(ValueError):
        to_prefix(expression)


@pytest.mark.parametrize("expression", ["+ 1", "1 2", "", "+ x 1"])
def test_evaluate_rejects_bad_input(expression):
    with pytest.raises(ValueError):
        evaluate_prefix(expression)


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_prefix("/ 1 0")


def test_main_with_arguments(capsys):
    assert main(["(1+2)*3"]) == 0
    out = capsys.readouterr().out
    assert f"prefix: {to_prefix('(1+2)*3')}" in out
    assert f"result: {(1 + 2) * 3:g}" in out


def test_main_reports_errors(capsys):
    assert main(["(1+2"]) == 1
    assert "error" in capsys.readouterr().err


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1+2\nn\n"))
    assert main([]) == 0
    assert f"result: {1 + 2:g}" in capsys.readouterr().out