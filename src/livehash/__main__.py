# SPDX-License-Identifier: MIT
"""
Module entry-point: python -m livehash
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
