#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four against a minimax opponent
"""

import sys

from connect4_minimax.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
