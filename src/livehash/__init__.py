# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
livehash: Verify a directory tree against a reference md5 manifest
"""
__all__ = ["__version__"]
__version__ = "0.2.0"
