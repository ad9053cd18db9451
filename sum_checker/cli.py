#!/usr/bin/env python3
"""
Sum Checker CLI

Reads a JSON array of integers from a file or stdin, sums it, checks the
HTTP status of the URL configured in the environment file and writes a
short report to the output file. Every step is logged to a log file.
"""

import sys

import click

from sum_checker import (
    STDIN_SOURCE,
    SumCheckException,
    build_report,
    format_numbers,
    read_numbers,
    sum_numbers,
)
from sum_checker.client import DEFAULT_TIMEOUT, HTTP_OK, URLStatusClient
from sum_checker.config import get_target_url, init_logger, load_config, write_report

DEFAULT_LOG_FILE = "app.log"
DEFAULT_CONFIG_FILE = ".env"
DEFAULT_OUTPUT_FILE = "output.txt"


def fail(message):
    """Print an error message in red and exit with status 1."""
    click.echo(click.style(message, fg="red"))
    sys.exit(1)


def run(source, output, log_file, config_file, timeout=DEFAULT_TIMEOUT):
    """
    Run every step in order, stopping at the first failure.

    Args:
        source (str): Path to a JSON file, or 'stdin'
        output (str): File the report is written to
        log_file (str): Log file, appended to
        config_file (str): Environment file with TARGET_URL
        timeout (float): HTTP request timeout in seconds

    Raises:
        SystemExit: With status 1 when any step fails
    """
    try:
        load_config(config_file)
    except SumCheckException as e:
        fail(f"Error loading configuration: {e}")

    try:
        url = get_target_url()
    except SumCheckException as e:
        fail(str(e))

    try:
        logger = init_logger(log_file)
    except SumCheckException as e:
        fail(f"Failed to initialize logger: {e}")
    logger.info("Program started")

    try:
        numbers = read_numbers(source, prompt=sys.stdout)
    except SumCheckException as e:
        logger.error(f"Error reading data: {e}")
        fail(f"Error: {e}")
    logger.info(f"Numbers: {format_numbers(numbers)}")

    total = sum_numbers(numbers)
    logger.info(f"Sum: {total}")

    client = URLStatusClient(timeout=timeout)
    try:
        status_code = client.check(url)
    except SumCheckException as e:
        logger.error(f"Error performing HTTP request: {e}")
        fail(f"HTTP request error: {e}")
    logger.info(f"HTTP GET to URL '{url}', response status: {status_code}")

    if status_code == HTTP_OK:
        logger.info("Request succeeded (status 200)")
    else:
        logger.warning(f"Unexpected response status: {status_code}")

    try:
        write_report(output, build_report(numbers, total, status_code))
    except SumCheckException as e:
        logger.error(f"Error creating output file: {e}")
        fail(f"Error creating output file: {e}")

    logger.info(f"Result saved to file: {output}")
    logger.info("Program finished successfully")
    click.echo(click.style(
        f"Program finished successfully. Result saved to file: {output}", fg="green"))


@click.command(context_settings={'help_option_names': ['-h', '-help', '--help']})
@click.option('-source', '--source', 'source', default=STDIN_SOURCE, show_default=True,
              help="Data source: 'stdin' or a path to a JSON file")
@click.option('-output', '--output', 'output', default=DEFAULT_OUTPUT_FILE, show_default=True,
              help='File the result is written to')
@click.option('-log', '--log', 'log_file', default=DEFAULT_LOG_FILE, show_default=True,
              help='Log file')
@click.option('-config', '--config', 'config_file', default=DEFAULT_CONFIG_FILE, show_default=True,
              help='Environment file with TARGET_URL')
@click.option('-timeout', '--timeout', 'timeout', default=DEFAULT_TIMEOUT, show_default=True,
              type=click.FloatRange(min=0, min_open=True),
              help='HTTP request timeout in seconds')
@click.version_option(package_name='sum-checker')
def main(source, output, log_file, config_file, timeout):
    """Sum a JSON array of integers and check the configured URL."""
    run(source, output, log_file, config_file, timeout)


if __name__ == '__main__':
    main()
