"""Error taxonomy and classification tests."""

from __future__ import annotations

import pytest

from exolix_sdk.base.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorKind,
    ExolixError,
    ValidationError,
    classify_status,
    extract_error_message,
    is_retryable,
)
from exolix_sdk.base.outcome import Cancelled, StructuredError, TransportFailure, TypedPayload


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (418, ErrorCode.VALIDATION),
        (429, ErrorCode.RATE_LIMIT),
        (503, ErrorCode.UNAVAILABLE),
        (599, ErrorCode.SERVER_ERROR),
        (0, ErrorCode.UNKNOWN),
        (302, ErrorCode.UNKNOWN),
    ],
)
def test_classify_http_status_mapping(status, code):
    assert classify_status(status) is code  # nosec B101 - assert is appropriate in unit tests


def test_retryable_codes():
    assert is_retryable(ErrorCode.RATE_LIMIT)  # nosec B101
    assert is_retryable(ErrorCode.NETWORK)  # nosec B101
    assert not is_retryable(ErrorCode.NOT_FOUND)  # nosec B101
    assert not is_retryable(ErrorCode.CANCELLED)  # nosec B101


def test_extract_error_message_priority():
    assert extract_error_message({"message": "m", "error": "e"}) == "m"  # nosec B101
    assert extract_error_message({"message": None, "error": "e"}) == "e"  # nosec B101
    assert extract_error_message({"detail": {"field": "amount"}}) == "{'field': 'amount'}"  # nosec B101
    assert extract_error_message("<html>", "Bad Gateway") == "Bad Gateway"  # nosec B101
    assert extract_error_message(["x"], "") == "Request failed"  # nosec B101


def test_default_codes_follow_kind():
    assert ExolixError("x", kind=ErrorKind.TRANSPORT).code is ErrorCode.NETWORK  # nosec B101
    assert ExolixError("x", kind=ErrorKind.CANCELLED).code is ErrorCode.CANCELLED  # nosec B101
    assert ExolixError("x", 200, kind=ErrorKind.DECODE).code is ErrorCode.DECODE  # nosec B101
    assert ExolixError("x", 500).code is ErrorCode.SERVER_ERROR  # nosec B101
    explicit = ExolixError("x", 500, code=ErrorCode.TRANSIENT)
    assert explicit.code is ErrorCode.TRANSIENT and explicit.retryable  # nosec B101


def test_validation_error_is_value_error():
    err = ValidationError("id is required", field="id")
    assert isinstance(err, ExolixError) and isinstance(err, ValueError)  # nosec B101
    assert err.kind is ErrorKind.VALIDATION and err.status == 0  # nosec B101
    assert err.field == "id"  # nosec B101
    assert not issubclass(ConfigurationError, ExolixError)  # nosec B101


def test_outcomes_unwrap_into_uniform_errors():
    assert TypedPayload({"a": 1}).unwrap() == {"a": 1}  # nosec B101

    structured = StructuredError("not found", 404, "https://api.test/v2/x", {"message": "not found"}).to_error()
    assert (structured.kind, structured.status, structured.code) == (  # nosec B101
        ErrorKind.STRUCTURED,
        404,
        ErrorCode.NOT_FOUND,
    )
    assert structured.data == {"message": "not found"}  # nosec B101

    with pytest.raises(ExolixError) as info:
        TransportFailure("connection refused", "https://api.test/v2/x").unwrap()
    assert info.value.status == 0 and info.value.url == "https://api.test/v2/x"  # nosec B101

    cancelled = Cancelled("https://api.test/v2/x", "user aborted").to_error()
    assert str(cancelled) == "The request was aborted"  # nosec B101
    assert cancelled.reason == "user aborted" and not cancelled.timed_out  # nosec B101
