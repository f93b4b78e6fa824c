import logging

import pytest

from mdterm.observability.base import LoggingMetricsHook, NoOpMetricsHook


class TestNoOpMetricsHook:
    def test_accepts_all_measurements(self) -> None:
        hook = NoOpMetricsHook()

        assert hook.record_latency("x", 1.0) is None
        assert hook.increment("x", 2, labels={"a": "b"}) is None
        assert hook.record_gauge("x", 3.0) is None


class TestLoggingMetricsHook:
    def test_logs_each_measurement(self, caplog: pytest.LogCaptureFixture) -> None:
        hook = LoggingMetricsHook()

        with caplog.at_level(logging.DEBUG, logger="mdterm.metrics"):
            hook.record_latency("markdown_parse_duration", 1.5)
            hook.increment("markdown_parse_total")
            hook.record_gauge("markdown_headings_found", 4, labels={"doc": "a"})

        messages = [r.getMessage() for r in caplog.records]
        assert messages == [
            "markdown_parse_duration=1.500ms labels={}",
            "markdown_parse_total+=1 labels={}",
            "markdown_headings_found=4 labels={'doc': 'a'}",
        ]

    def test_uses_given_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        hook = LoggingMetricsHook(logging.getLogger("viewer.metrics"))

        with caplog.at_level(logging.DEBUG, logger="viewer.metrics"):
            hook.increment("n", 3)

        assert caplog.records[0].name == "viewer.metrics"
