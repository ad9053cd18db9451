"""Tests for the URL status client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from sum_checker import SumCheckException
from sum_checker.client import DEFAULT_TIMEOUT, HTTP_OK, URLStatusClient, check_url


def test_check_url_ok(target_server):
    """Test that a reachable endpoint returning 200 is reported as success."""
    assert check_url(f"{target_server}/health") == HTTP_OK


@pytest.mark.parametrize("path, expected", [
    ("/missing", 404),
    ("/broken", 500),
    ("/no-such-route", 404),
])
def test_check_url_non_ok_status(target_server, path, expected):
    """Test that error statuses are returned, not raised."""
    assert check_url(f"{target_server}{path}") == expected


def test_check_url_unreachable():
    """Test that an unreachable URL yields an error with zero status."""
    with pytest.raises(SumCheckException) as exc_info:
        check_url("http://invalid-url.invalid", timeout=5)
    assert exc_info.value.status_code == 0
    assert "error performing HTTP request" in str(exc_info.value)


@pytest.mark.parametrize("url", [
    "not a url",
    "http://a..b/",
    "http://" + "a" * 64 + ".com",
])
def test_check_url_malformed(url):
    """Test that a malformed URL is reported as a request error."""
    with pytest.raises(SumCheckException) as exc_info:
        check_url(url)
    assert exc_info.value.status_code == 0


@patch('sum_checker.client.requests.get')
def test_client_passes_timeout(mock_get):
    """Test that the configured timeout is passed to requests."""
    response = MagicMock()
    response.status_code = 204
    mock_get.return_value.__enter__.return_value = response

    client = URLStatusClient(timeout=2.5)
    assert client.check("http://example.test") == 204
    mock_get.assert_called_once_with("http://example.test", timeout=2.5, stream=True)


@patch('sum_checker.client.requests.get')
def test_client_default_timeout(mock_get):
    """Test the default timeout."""
    mock_get.return_value.__enter__.return_value.status_code = 200
    URLStatusClient().check("http://example.test")
    mock_get.assert_called_once_with("http://example.test", timeout=DEFAULT_TIMEOUT, stream=True)


@patch('sum_checker.client.requests.get')
def test_client_wraps_timeout_error(mock_get):
    """Test that a timeout is wrapped in SumCheckException."""
    mock_get.side_effect = requests.exceptions.Timeout("timed out")
    with pytest.raises(SumCheckException) as exc_info:
        URLStatusClient(timeout=1).check("http://example.test")
    assert exc_info.value.status_code == 0
    assert isinstance(exc_info.value.__cause__, requests.exceptions.Timeout)
