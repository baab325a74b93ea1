#!/usr/bin/env python3
"""
Entry point for running ckv as a Python module.

This allows users to run: python -m ckv <command> <args>
"""

from ckv.cli import main

if __name__ == "__main__":
    main()
