import pytest

from resgate import errors
from resgate.errors import ResError, internal_error, is_error, res_error


def test_res_error_passes_through_res_errors():
    err = ResError("system.custom", "Custom")
    assert res_error(err) is err


def test_res_error_wraps_other_errors_as_internal():
    wrapped = res_error(ValueError("boom"))
    assert wrapped.code == errors.CODE_INTERNAL_ERROR
    assert wrapped.message == "Internal error: boom"


def test_internal_error_message_prefix():
    err = internal_error(RuntimeError("disk"))
    assert str(err) == "Internal error: disk"
    assert is_error(err, "system.internalError")


@pytest.mark.parametrize(
    "err, code, expected",
    [
        (errors.ERR_NOT_FOUND, "system.notFound", True),
        (errors.ERR_TIMEOUT, "system.notFound", False),
        (ValueError("x"), "system.notFound", False),
        (None, "system.notFound", False),
    ],
)
def test_is_error(err, code, expected):
    assert is_error(err, code) is expected


def test_to_dict_omits_missing_data():
    assert errors.ERR_ACCESS_DENIED.to_dict() == {
        "code": "system.accessDenied",
        "message": "Access denied",
    }


def test_to_dict_includes_data():
    err = ResError("system.custom", "Custom", {"foo": "bar"})
    assert err.to_dict() == {"code": "system.custom", "message": "Custom", "data": {"foo": "bar"}}


def test_equality_by_fields():
    assert ResError("system.invalidParams", "Invalid parameters") == errors.ERR_INVALID_PARAMS
    assert ResError("system.invalidParams", "Other") != errors.ERR_INVALID_PARAMS


def test_can_be_raised_and_caught():
    err = res_error(KeyError("missing"))
    assert err.code == "system.internalError"
    assert err.to_dict() == {
        "code": "system.internalError",
        "message": "Internal error: 'missing'",
    }
    with pytest.raises(ResError) as info:
        raise err
    assert info.value is err
    assert is_error(info.value, "system.internalError")