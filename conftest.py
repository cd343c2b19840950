# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT
#
# conftest.py — test environment:
#   • src/ on sys.path so tests run without an editable install
#   • no audit directory leaks in from the caller's environment

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # so that import sees src/


@pytest.fixture(autouse=True)
def _isolate_policy_env(monkeypatch):
    """Drop GFSHARE_* overrides inherited from the shell."""
    for name in ("GFSHARE_PARTS", "GFSHARE_THRESHOLD", "GFSHARE_AUDIT_DIR"):
        monkeypatch.delenv(name, raising=False)
    yield
