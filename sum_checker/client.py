"""
URL Status Client

A thin client that issues a single GET request to the configured target URL
and reports the HTTP status code of the response.
"""

import logging

import requests

from sum_checker import SumCheckException

logger = logging.getLogger(__name__)

HTTP_OK = 200
DEFAULT_TIMEOUT = 10.0


class URLStatusClient:
    """Client for checking the HTTP status of a URL."""

    def __init__(self, timeout=DEFAULT_TIMEOUT):
        """
        Initialize the client.

        Args:
            timeout (float): Request timeout in seconds
        """
        self.timeout = timeout

    def check(self, url):
        """
        Perform a GET request and return the response status code.

        Any status code, including 4xx and 5xx, counts as a completed request.

        Args:
            url (str): The URL to request

        Returns:
            int: The HTTP status code of the response

        Raises:
            SumCheckException: If the request could not be performed. The
                exception's status_code is 0.
        """
        logger.debug(f"GET {url} (timeout={self.timeout}s)")
        try:
            with requests.get(url, timeout=self.timeout, stream=True) as response:
                return response.status_code
        except (requests.exceptions.RequestException, ValueError) as e:
            # urllib3 reports malformed hosts as LocationParseError, a ValueError
            raise SumCheckException(f"error performing HTTP request: {e}", status_code=0) from e


def check_url(url, timeout=DEFAULT_TIMEOUT):
    """Shortcut for ``URLStatusClient(timeout).check(url)``."""
    return URLStatusClient(timeout=timeout).check(url)
