#!/usr/bin/env python3
"""
Script to present a markdown document as terminal slides.
This is a thin wrapper around the mdpresent package.
"""

import sys
from mdpresent.cli import main

if __name__ == '__main__':
    sys.exit(main())
