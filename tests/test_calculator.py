import io

import intcalc
from intcalc.calculator import calculate, try_calculate


def test_calculate_from_stream():
    assert calculate(io.StringIO("6*7")) == 42


def test_try_calculate_ok():
    assert try_calculate("2+3*4") == {"ok": True, "value": 14, "error": None}


def test_try_calculate_division_by_zero():
    result = try_calculate("5/0")
    assert result["ok"] is False
    assert result["value"] is None
    assert result["kind"] == "DivisionByZero"
    assert result["error"] == "division by zero at position 1"
    assert result["position"] == 1


def test_try_calculate_syntax_error():
    for src in ("2+", "(2+3", "2++3"):
        result = try_calculate(src)
        assert result["ok"] is False
        assert result["kind"] == "ParseError"


def test_try_calculate_limits():
    result = try_calculate("((1))", {"max_depth": 1})
    assert result["kind"] == "DepthExceeded"
    assert result["position"] == 1


def test_package_exports():
    assert intcalc.calculate("1+1") == 2
    assert intcalc.evaluate(intcalc.parse("9/3")) == 3
    assert issubclass(intcalc.ParseError, intcalc.CalcError)
    assert intcalc.Limits().max_depth == 64


def test_try_calculate_reports_bad_input():
    assert try_calculate("1" * 5000)["kind"] == "IntegerOverflow"
    assert try_calculate(b"1+\xff")["kind"] == "ParseError"
