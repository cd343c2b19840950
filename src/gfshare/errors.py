# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by gfshare."""
from __future__ import annotations


class GFShareError(Exception):
    """Base class for all gfshare errors."""


class InvalidConfiguration(GFShareError, ValueError):
    """Raised when a scheme is created with unusable parameters."""


class InvalidArgument(GFShareError, ValueError):
    """Raised when parts handed to ``join`` cannot be combined."""


class DivisionByZero(GFShareError, ZeroDivisionError):
    """Raised by the field engine when dividing by the zero element."""


__all__ = ["GFShareError", "InvalidConfiguration", "InvalidArgument", "DivisionByZero"]
