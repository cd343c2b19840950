# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Default sharing parameters.

The policy gathers the tunables shared by the command line and by callers that
do not want to hard-code the number of parts. Values can be overridden through
environment variables so deployments can change them without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_path(name: str) -> Path | None:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class SharingPolicy:
    """Default scheme parameters and audit location."""

    parts_count: int = 5
    threshold: int = 3
    audit_dir: Path | None = None


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    return SharingPolicy(
        parts_count=_load_int("GFSHARE_PARTS", 5),
        threshold=_load_int("GFSHARE_THRESHOLD", 3),
        audit_dir=_load_path("GFSHARE_AUDIT_DIR"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
