"""Tests for global-search query classification."""

from __future__ import annotations

from datetime import datetime

import pytest

from ic_table.classifier import CLASSIFIERS, QueryKind, classify_query

pytestmark = pytest.mark.unit_table


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("2024", QueryKind.DATE),
        ("2024-01-15", QueryKind.DATE),
        ("2024-01-15T10:30:00Z", QueryKind.DATE),
        ("42", QueryKind.NUMERIC),
        (" 3.5 ", QueryKind.NUMERIC),
        ("-7", QueryKind.NUMERIC),
        ("alice@example.com", QueryKind.EMAIL),
        ("widget", QueryKind.TEXT),
        ("a@b", QueryKind.TEXT),
        ("2024-13-01", QueryKind.TEXT),
        ("nan", QueryKind.TEXT),
    ],
)
def test_classify_query_kind(raw: str, kind: QueryKind) -> None:
    result = classify_query(raw)
    assert result is not None
    assert result.kind is kind
    assert result.raw == raw


def test_year_is_a_date_not_a_number() -> None:
    result = classify_query("2024")
    assert result is not None
    assert result.kind is QueryKind.DATE
    assert result.value == datetime(2024, 1, 1)


def test_two_digit_query_is_a_number_not_a_century() -> None:
    result = classify_query("42")
    assert result is not None
    assert result.kind is QueryKind.NUMERIC
    assert result.value == 42


def test_numeric_value_is_cast() -> None:
    result = classify_query("42")
    assert result is not None
    assert result.value == 42
    assert isinstance(result.value, int)


def test_email_and_text_keep_raw_string() -> None:
    assert classify_query("Bob@Example.com").value == "Bob@Example.com"
    assert classify_query(" spaced ").value == " spaced "


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_empty_query_has_no_classification(raw: str) -> None:
    assert classify_query(raw) is None


def test_classifier_priority_order() -> None:
    assert [kind for kind, _ in CLASSIFIERS] == [
        QueryKind.DATE,
        QueryKind.NUMERIC,
        QueryKind.EMAIL,
        QueryKind.TEXT,
    ]
