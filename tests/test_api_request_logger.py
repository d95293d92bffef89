"""Tests for API request tracing."""

from unittest.mock import MagicMock, patch

import pytest

from gauge_finder.adapters.api_request_logger import (
    describe_request,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given GAUGE_FINDER_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("GAUGE_FINDER_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "1", "yes"])
    def test_when_env_enabled_then_returns_true(
        self, value: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given a truthy GAUGE_FINDER_LOG_REQUESTS, when checking, then returns True."""
        monkeypatch.setenv("GAUGE_FINDER_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given GAUGE_FINDER_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("GAUGE_FINDER_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestDescribeRequest:
    """Tests for the one-line request description."""

    def test_params_are_sorted_into_query_string(self) -> None:
        """Given unsorted params, when describing, then they are appended sorted."""
        line = describe_request("get", "https://x.test/id/stations", {"long": -2.7, "lat": 51.5})

        assert line == "GET https://x.test/id/stations?lat=51.5&long=-2.7"

    def test_existing_query_string_is_extended(self) -> None:
        """Given a URL with a query string, when describing, then params are joined with &."""
        line = describe_request("GET", "https://x.test/s?a=1", {"b": 2})

        assert line == "GET https://x.test/s?a=1&b=2"

    def test_sensitive_headers_are_masked(self) -> None:
        """Given an Authorization header, when describing, then its value is masked."""
        line = describe_request(
            "GET", "https://x.test", headers={"Authorization": "secret", "Accept": "application/json"}
        )

        assert "secret" not in line
        assert "application/json" in line


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("gauge_finder.adapters.api_request_logger.should_log_requests", return_value=False)
    @patch("gauge_finder.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given tracing disabled, when logging a request, then nothing is logged."""
        log_api_request("GET", "https://example.com/api")

        mock_logger.info.assert_not_called()

    @patch("gauge_finder.adapters.api_request_logger.should_log_requests", return_value=True)
    @patch("gauge_finder.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_request(
        self, mock_logger: MagicMock, _mock_should_log: MagicMock
    ) -> None:
        """Given tracing enabled, when logging a request, then the request line is logged."""
        log_api_request("GET", "https://example.com/api", params={"_limit": 10})

        mock_logger.info.assert_called_once()
        assert "GET https://example.com/api?_limit=10" in mock_logger.info.call_args[0][0]
