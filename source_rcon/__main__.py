#!/usr/bin/env python3
"""
Main entry point for source-rcon when run as a module.

This allows the package to be executed with: python -m source_rcon
"""

from .cli import main

if __name__ == '__main__':
    main()
