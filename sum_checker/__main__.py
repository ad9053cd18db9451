#!/usr/bin/env python3
"""
Main entry point for ``python -m sum_checker``.
"""

from sum_checker.cli import main

if __name__ == "__main__":
    main()
