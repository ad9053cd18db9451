"""Sum Checker Library

This module provides the core functionality for reading a JSON array of
integers, summing it, and rendering the plain-text result report.
"""

import json
import sys
from typing import List, Optional, TextIO, Union

__version__ = "0.1.0"

STDIN_SOURCE = "stdin"
STDIN_PROMPT = "Enter a JSON array of numbers and press Enter:"


class SumCheckException(Exception):
    """Exception raised for errors in the sum checker operations."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def parse_numbers(data: Union[str, bytes]) -> List[int]:
    """
    Decode a JSON document that must be an array of integers.

    Args:
        data: Raw JSON text

    Returns:
        The decoded integers, in order. ``null`` decodes to an empty list.

    Raises:
        SumCheckException: If the document is not an array of integers
    """
    try:
        decoded = json.loads(data)
    except (ValueError, TypeError, RecursionError) as e:
        raise SumCheckException(f"error parsing JSON: {e}") from e

    if decoded is None:
        return []

    if not isinstance(decoded, list):
        raise SumCheckException(
            f"error parsing JSON: expected an array, got {type(decoded).__name__}"
        )

    for i, value in enumerate(decoded):
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise SumCheckException(
                f"error parsing JSON: element {i} is not an integer: {value!r}"
            )

    return decoded


def read_numbers(source: str, stdin: Optional[TextIO] = None,
                 prompt: Optional[TextIO] = None) -> List[int]:
    """
    Read a JSON array of integers from a file or from standard input.

    Args:
        source: Path to a JSON file, or the literal ``"stdin"``
        stdin: Stream to read from when source is ``"stdin"`` (defaults to sys.stdin)
        prompt: Optional stream the input prompt is written to

    Returns:
        The integers read from the source

    Raises:
        SumCheckException: If the source cannot be read or parsed
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        if prompt is not None:
            print(STDIN_PROMPT, file=prompt, flush=True)
        try:
            data = stream.readline()
        except (OSError, ValueError) as e:
            raise SumCheckException(f"error reading data from stdin: {e}") from e
        if not data:
            raise SumCheckException("error reading data from stdin: unexpected end of input")
    else:
        try:
            with open(source, 'rb') as file:
                data = file.read()
        except OSError as e:
            raise SumCheckException(f"error reading file: {e}") from e

    return parse_numbers(data)


def sum_numbers(numbers: List[int]) -> int:
    """
    Add up a sequence of integers.

    Args:
        numbers: Integers to add

    Returns:
        int: The sum, 0 for an empty sequence
    """
    total = 0
    for number in numbers:
        total += number
    return total


def format_numbers(numbers: List[int]) -> str:
    """Render numbers as a bracketed, space separated list, e.g. ``[1 2 3]``."""
    return "[" + " ".join(str(n) for n in numbers) + "]"


def build_report(numbers: List[int], total: int, status_code: int) -> str:
    """
    Build the three-line text report written to the output file.

    Args:
        numbers: The integers that were read
        total: Their sum
        status_code: HTTP status code returned by the target URL

    Returns:
        str: The report text, each line newline-terminated
    """
    return (
        f"Numbers: {format_numbers(numbers)}\n"
        f"Sum: {total}\n"
        f"HTTP status: {status_code}\n"
    )
