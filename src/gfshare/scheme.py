# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over GF(256).

A :class:`Scheme` splits a secret into ``n`` parts of which any ``k`` recover
it. Each byte of the secret becomes the constant term of its own random
polynomial of degree ``k - 1``; part ``p`` holds the evaluations of those
polynomials at ``x = p``.

There is no way to tell whether :meth:`Scheme.join` returned the original
secret. Incorrect or tampered parts produce a different value without any
error, so callers who need integrity should add a MAC to the secret before
splitting it.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Dict, Mapping

from . import gf256
from .errors import InvalidArgument, InvalidConfiguration
from .gf256 import RandomSource
from .policy import SharingPolicy, load_policy

_logger = logging.getLogger(__name__)

MAX_PARTS = 255


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def wipe(buffer: bytearray) -> None:
    """Overwrite ``buffer`` with zeros in place."""

    buffer[:] = bytes(len(buffer))


@dataclass(frozen=True)
class Scheme:
    """Split secrets into ``parts_count`` parts with a ``threshold`` quorum."""

    parts_count: int
    threshold: int
    random: RandomSource = field(default=secrets.token_bytes, repr=False)

    def __post_init__(self) -> None:
        if not (_is_int(self.parts_count) and _is_int(self.threshold)):
            raise InvalidConfiguration("Number of parts and threshold must be integers")
        if self.threshold <= 1:
            raise InvalidConfiguration("Must have more than 1 part")
        if self.parts_count < self.threshold:
            raise InvalidConfiguration("Threshold must be <= the number of parts")
        if self.parts_count > MAX_PARTS:
            raise InvalidConfiguration(f"Number of parts must be <= {MAX_PARTS}")

    @classmethod
    def from_policy(
        cls,
        policy: SharingPolicy | None = None,
        *,
        random: RandomSource = secrets.token_bytes,
    ) -> Scheme:
        """Create a scheme from the configured defaults."""

        if policy is None:
            policy = load_policy()
        return cls(policy.parts_count, policy.threshold, random)

    @property
    def n(self) -> int:
        return self.parts_count

    @property
    def k(self) -> int:
        return self.threshold

    def split(self, secret: bytes) -> Dict[int, bytes]:
        """Split ``secret`` into ``n`` parts keyed by their identifiers ``1..n``."""

        values = [bytearray(len(secret)) for _ in range(self.parts_count)]
        for i, byte in enumerate(secret):
            poly = gf256.generate(self.random, self.threshold - 1, byte)
            for part in range(1, self.parts_count + 1):
                values[part - 1][i] = gf256.evaluate(poly, part)
            wipe(poly)
        _logger.debug(
            "split %d bytes into %d parts (threshold %d)",
            len(secret),
            self.parts_count,
            self.threshold,
        )
        return {part: bytes(value) for part, value in enumerate(values, start=1)}

    def join(self, parts: Mapping[int, bytes]) -> bytearray:
        """Recover the secret from at least ``k`` parts.

        Raises :class:`InvalidArgument` when ``parts`` is empty, holds fewer
        than ``k`` entries, uses identifiers outside ``1..255`` or holds values
        of varying lengths.
        """

        if not parts:
            raise InvalidArgument("No parts provided")
        if len(parts) < self.threshold:
            raise InvalidArgument("Not enough parts provided")
        for ident in parts:
            if not _is_int(ident) or not 1 <= ident <= MAX_PARTS:
                raise InvalidArgument(f"Invalid part identifier: {ident!r}")
        lengths = {len(value) for value in parts.values()}
        if len(lengths) != 1:
            raise InvalidArgument("Varying lengths of part values")
        length = lengths.pop()

        secret = bytearray(length)
        for i in range(length):
            points = [(ident, value[i]) for ident, value in parts.items()]
            secret[i] = gf256.interpolate(points)
        _logger.debug("joined %d parts into %d bytes", len(parts), length)
        return secret


__all__ = ["Scheme", "wipe", "MAX_PARTS"]
