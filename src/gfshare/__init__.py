# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over GF(256)."""

from __future__ import annotations

from .errors import DivisionByZero, GFShareError, InvalidArgument, InvalidConfiguration
from .scheme import Scheme, wipe

__all__ = [
    "Scheme",
    "wipe",
    "GFShareError",
    "InvalidConfiguration",
    "InvalidArgument",
    "DivisionByZero",
]
