from __future__ import annotations

import logging

from utils.decorators_utils import fallback_on_error


def test_fallback_on_error_passes_results_through() -> None:
    @fallback_on_error(default=None)
    def double(value):
        return value * 2

    assert double(21) == 42


def test_fallback_on_error_logs_and_returns_default(caplog) -> None:
    @fallback_on_error(default=0)
    def explode():
        raise ValueError("bad payload")

    with caplog.at_level(logging.ERROR):
        assert explode() == 0

    (record,) = caplog.records
    assert "explode failed, returning fallback: bad payload" in record.getMessage()
    assert record.exc_info is not None


def test_fallback_on_error_calls_factory_defaults() -> None:
    @fallback_on_error(default=list)
    def explode():
        raise KeyError("images")

    first = explode()
    second = explode()

    assert first == []
    assert first is not second


def test_fallback_on_error_keeps_function_metadata() -> None:
    @fallback_on_error()
    def adapt_item():
        """Adapt an item."""

    assert adapt_item.__name__ == "adapt_item"
    assert adapt_item.__doc__ == "Adapt an item."
