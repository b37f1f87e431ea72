"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ic_common.errors import (
    DatasetError,
    ICError,
    TableConfigurationError,
    UnknownColumnError,
    normalize_context,
    wrap_error,
)


pytestmark = pytest.mark.unit_common


def test_context_is_normalized() -> None:
    err = DatasetError(
        "boom",
        context={
            "path": Path("/tmp/test"),
            "count": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )

    assert err.context["path"].endswith("test")
    assert err.context["count"] == 3
    assert err.context["nested"]["value"] == "nested"
    assert err.context["items"] == ["a", "b"]


def test_to_dict() -> None:
    payload = UnknownColumnError("Unknown column 'x'", context={"column_id": "x"}).to_dict()

    assert payload == {
        "type": "UnknownColumnError",
        "message": "Unknown column 'x'",
        "context": {"column_id": "x"},
    }


def test_wrap_error_keeps_cause() -> None:
    cause = ValueError("bad")

    err = wrap_error(TableConfigurationError, "invalid", cause=cause)

    assert isinstance(err, ICError)
    assert err.__cause__ is cause
    assert err.error_type == "TableConfigurationError"
    assert err.context == {}


def test_normalize_context_handles_none() -> None:
    assert normalize_context({"missing": None, "flag": True}) == {"missing": None, "flag": True}
