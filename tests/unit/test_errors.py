from __future__ import annotations

from datashape.errors import ERROR_CODE_UNSUPPORTED_INPUT, UnsupportedInputError


def test_unsupported_input_error_code_is_stable() -> None:
    assert ERROR_CODE_UNSUPPORTED_INPUT == "UNSUPPORTED_INPUT"


def test_unsupported_input_error_is_a_value_error() -> None:
    error = UnsupportedInputError("bad input", kind="leaf")
    assert isinstance(error, ValueError)
    assert str(error) == "bad input"


def test_unsupported_input_error_carries_code_and_kind() -> None:
    error = UnsupportedInputError("bad input", kind="opaque")
    assert error.code == "UNSUPPORTED_INPUT"
    assert error.kind == "opaque"
    assert UnsupportedInputError("bad input").kind is None
