"""Tests for domain exceptions (error_code, message, details)."""

from isp_translator.domain.enums import TranslationSource
from isp_translator.domain.exceptions import (
    EdgeWriteError,
    ResourceNotFoundException,
    StoreReadError,
    StoreWriteError,
    TranslatorException,
    UnauthorizedException,
    UpstreamTransformError,
    ValidationException,
)


def test_translator_exception_default_error_code() -> None:
    """Base TranslatorException uses class name as error_code when not provided."""
    exc = TranslatorException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TranslatorException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = TranslatorException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception_field() -> None:
    exc = ValidationException("Missing text or locale", field="text")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "text"}
    assert ValidationException("bad").details == {}


def test_upstream_transform_error() -> None:
    exc = UpstreamTransformError("unexpected status", status_code=503)
    assert exc.error_code == "UPSTREAM_TRANSFORM_ERROR"
    assert exc.message == "Translation provider error"
    assert exc.details == {"reason": "unexpected status", "status_code": 503}
    assert "status_code" not in UpstreamTransformError("timeout").details


def test_store_errors() -> None:
    read = StoreReadError("abc", "locked")
    assert read.error_code == "STORE_READ_ERROR"
    assert read.details["cache_key"] == "abc"
    write = StoreWriteError("abc", "UNIQUE", duplicate=True)
    assert write.error_code == "STORE_WRITE_ERROR"
    assert write.duplicate is True
    assert StoreWriteError("abc", "disk full").duplicate is False


def test_edge_write_error() -> None:
    exc = EdgeWriteError("abc")
    assert exc.error_code == "EDGE_WRITE_ERROR"
    assert "abc" in exc.message


def test_unauthorized_and_not_found() -> None:
    assert UnauthorizedException().error_code == "AUTHENTICATION_ERROR"
    assert UnauthorizedException().message == "Unauthorized"
    exc = ResourceNotFoundException("translation", "abc")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "translation not found: abc"


def test_all_are_translator_exceptions() -> None:
    for exc in (
        ValidationException("x"),
        UpstreamTransformError("x"),
        StoreReadError("k", "x"),
        StoreWriteError("k", "x"),
        EdgeWriteError("k"),
        UnauthorizedException(),
        ResourceNotFoundException("r", "1"),
    ):
        assert isinstance(exc, TranslatorException)


def test_translation_source_cache_status() -> None:
    assert TranslationSource.EDGE.cache_status == "HIT-EDGE"
    assert TranslationSource.CACHE.cache_status == "HIT-STORE"
    assert TranslationSource.AI.cache_status == "MISS"
    assert TranslationSource("ai") is TranslationSource.AI
