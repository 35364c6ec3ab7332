#!/usr/bin/env python3

import sys

from skirmish.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    finally:
        print("\nThanks for playing!")
