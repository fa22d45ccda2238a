import pytest

from bybitclient.errors import (
    ApiError,
    BybitError,
    HttpError,
    JsonError,
    MissingFieldError,
)


def test_api_error_message_and_attributes():
    err = ApiError(10001, "params error")
    assert str(err) == "api error: 10001 params error"
    assert err.code == 10001
    assert err.msg == "params error"


def test_missing_field_message():
    err = MissingFieldError("result")
    assert str(err) == "missing field: result"
    assert err.field == "result"


def test_http_error_wraps_cause():
    cause = ConnectionError("refused")
    err = HttpError(cause)
    assert err.error is cause
    assert str(err) == f"http error: {cause}"


def test_json_error_wraps_cause():
    cause = ValueError("bad json")
    err = JsonError(cause)
    assert err.error is cause
    assert str(err) == f"json error: {cause}"


@pytest.mark.parametrize(
    ("err", "expected"),
    [
        (HttpError("x"), "http error: x"),
        (JsonError("x"), "json error: x"),
        (ApiError(1, "x"), "api error: 1 x"),
        (MissingFieldError("x"), "missing field: x"),
    ],
)
def test_all_errors_share_base(err, expected):
    with pytest.raises(BybitError) as excinfo:
        raise err
    assert excinfo.value is err
    assert str(excinfo.value) == expected