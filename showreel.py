#!/usr/bin/env python3
"""
Convenience shim to run Showreel from a source checkout.
Usage: python showreel.py [add <imdbID>|remove|fetch|watch] [--config PATH]
"""

from showreel.cli import main


if __name__ == "__main__":
    main()
