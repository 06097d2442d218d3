"""Unit tests for failure classification."""

from __future__ import annotations

import httpx
import pytest

from core.errors import (
    DirectoryLookupError,
    FailureKind,
    MonitoringError,
    MonitoringServiceError,
    classify_failure,
)


def test_lookup_error_is_ignorable() -> None:
    exc = DirectoryLookupError("orders", "HTTP 404")

    assert classify_failure(exc) is FailureKind.IGNORABLE_LOOKUP
    assert "orders" in str(exc)
    assert isinstance(exc, MonitoringError)


@pytest.mark.parametrize(
    "exc",
    [
        MonitoringServiceError("HTTP 500", status_code=500),
        httpx.ConnectError("refused"),
        RuntimeError("boom"),
        ValueError("bad"),
    ],
)
def test_other_failures_are_fatal_to_log(exc: BaseException) -> None:
    assert classify_failure(exc) is FailureKind.FATAL_TO_LOG
