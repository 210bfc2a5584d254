#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--difficulty {e,m,h}] [--seed N] [--debug] [--no-tips]
    python main.py --config play.yaml
"""
import sys

from minesweeper.console import main


if __name__ == "__main__":
    sys.exit(main())
