"""Shared fixtures for the gfshare tests."""
from __future__ import annotations

import pytest


class ScriptedRandom:
    """Randomness source that replays fixed chunks, in order."""

    def __init__(self, *chunks: bytes) -> None:
        self._chunks = list(chunks)
        self.requests: list[int] = []

    def __call__(self, count: int) -> bytes:
        self.requests.append(count)
        chunk = self._chunks.pop(0)
        assert len(chunk) == count
        return chunk


@pytest.fixture
def scripted_random():
    return ScriptedRandom
