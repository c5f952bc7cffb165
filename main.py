#!/usr/bin/env python3
"""
Main entry point for the IRC server health probe
"""

from ircprobe.main import handler, run  # noqa: F401 - handler is the function entry point

if __name__ == "__main__":
    run()
