import io

import pytest

from exercisekit.expressions import (
    ExpressionError,
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    infix_to_prefix,
    main,
    precedence,
)


def test_precedence_ordering():
    assert precedence("^") > precedence("*") > precedence("+")
    assert precedence("*") == precedence("/")
    assert precedence("+") == precedence("-")
    assert precedence("(") < precedence("+")
    assert precedence("a") == precedence("(")


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_to_prefix_worked_example():
    assert infix_to_prefix("a+b*c") == "+a*bc"


def test_prefix_is_mirror_of_operands_order():
    result = infix_to_prefix("(1+2)*(3+4)")
    assert [c for c in result if c.isdigit()] == ["1", "2", "3", "4"]
    assert result[0] == "*"


def test_conversion_keeps_operands_in_order():
    result = infix_to_postfix("(a+b)*(c-d)")
    assert [c for c in result if c.isalpha()] == ["a", "b", "c", "d"]
    assert "(" not in result and ")" not in result
    assert result[-1] == "*"


@pytest.mark.parametrize(
    "infix, expected",
    [
        ("2+3*4", 2 + 3 * 4),
        ("(1+2)*(3+4)", (1 + 2) * (3 + 4)),
        ("9-4/2", 9 - 4 // 2),
        ("8*(7-5)", 8 * (7 - 5)),
    ],
)
def test_round_trip_through_both_notations(infix, expected):
    assert evaluate_postfix(infix_to_postfix(infix)) == expected
    assert evaluate_prefix(infix_to_prefix(infix)) == expected


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -(7 // 2)
    assert evaluate_prefix("/-072") == -(7 // 2)


def test_prefix_operand_order():
    assert evaluate_prefix("-92") == 9 - 2
    assert evaluate_postfix("92-") == 9 - 2


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b") == infix_to_postfix("a+b")
    assert evaluate_postfix("1 2 +") == evaluate_postfix("12+")


@pytest.mark.parametrize("infix", ["(a+b", "a+b)", ")a("])
def test_unbalanced_parentheses(infix):
    with pytest.raises(ExpressionError):
        infix_to_postfix(infix)
    with pytest.raises(ExpressionError):
        infix_to_prefix(infix)


@pytest.mark.parametrize("expression", ["", "1+", "12", "10/", "12%", "ab+"])
def test_bad_postfix(expression):
    with pytest.raises(ExpressionError):
        evaluate_postfix(expression)


@pytest.mark.parametrize("expression", ["", "+1", "12", "/10", "%12"])
def test_bad_prefix(expression):
    with pytest.raises(ExpressionError):
        evaluate_prefix(expression)


def test_main_with_argument(capsys):
    assert main(["to-postfix", "a+b*c"]) == 0
    assert capsys.readouterr().out == f"Postfix expression: {infix_to_postfix('a+b*c')}\n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("23*\n"))
    assert main(["eval-postfix"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(f"Result = {2 * 3}\n")
    assert out.startswith("Enter a postfix expression: ")


def test_main_reports_error(capsys):
    assert main(["eval-prefix", "+1"]) == 1
    assert "Error" in capsys.readouterr().err