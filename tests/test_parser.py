import io

import pytest
from intcalc.errors import ParseError
from intcalc.nodes import BinaryOp, Number, to_sexpr
from intcalc.parser import parse


def sexpr(src):
    return to_sexpr(parse(src))


def test_parse_number():
    assert parse("42") == Number(42)


def test_parse_binary():
    assert parse("1+2") == BinaryOp("+", Number(1), Number(2))


def test_operator_position():
    assert parse("10 / 2").position == 3


def test_precedence():
    assert sexpr("2+3*4") == "(+ 2 (* 3 4))"
    assert sexpr("2*3+4") == "(+ (* 2 3) 4)"


def test_parentheses_override_precedence():
    assert sexpr("(2+3)*4") == "(* (+ 2 3) 4)"


def test_left_fold_additive():
    assert sexpr("10-3-2") == "(- (- 10 3) 2)"


def test_left_fold_multiplicative():
    assert sexpr("20/4/5") == "(/ (/ 20 4) 5)"


def test_negative_literal_folds():
    assert parse("-5") == Number(-5)
    assert sexpr("-5*-5") == "(* -5 -5)"


def test_negated_group():
    assert sexpr("-(3+4)") == "(* -1 (+ 3 4))"


def test_redundant_parentheses_leave_no_wrapper():
    assert parse("((7))") == Number(7)


def test_parse_from_stream():
    assert sexpr(io.StringIO("1 + 2 * 3")) == "(+ 1 (* 2 3))"


# --- Syntax errors ---

def test_missing_operand():
    with pytest.raises(ParseError, match="unexpected end of input at position 2"):
        parse("2+")


def test_empty_input():
    with pytest.raises(ParseError, match="unexpected end of input"):
        parse("")


def test_unterminated_paren():
    with pytest.raises(ParseError, match=r"expected '\)' but found end of input"):
        parse("(2+3")


def test_doubled_operator():
    with pytest.raises(ParseError, match=r"expected number or '\(' but found '\+' at position 2"):
        parse("2++3")


def test_double_negation():
    with pytest.raises(ParseError, match="but found '-'"):
        parse("--5")


def test_empty_group():
    with pytest.raises(ParseError, match=r"but found '\)'"):
        parse("()")


def test_unbalanced_close_paren():
    with pytest.raises(ParseError, match=r"unbalanced '\)' at position 1"):
        parse("2)")


def test_trailing_number():
    with pytest.raises(ParseError, match="unexpected token number 3"):
        parse("2 3")


def test_implicit_multiplication_rejected():
    with pytest.raises(ParseError, match=r"unexpected token '\('"):
        parse("2(3)")


def test_unknown_operator_character():
    with pytest.raises(ParseError, match="unexpected character '%'"):
        parse("7%2")


def test_parse_error_is_syntax_error():
    with pytest.raises(SyntaxError):
        parse("1 + * 2")
