# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Offline audit records with Ed25519 signatures and hash chaining.

Records never contain secret material, only counts and lengths.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

GENESIS = "GENESIS"


def _encode(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


class AuditLog:
    """Append signed, chained JSON records to ``directory``."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"

    def _load_private_key(self) -> Ed25519PrivateKey:
        if self.key_path.exists():
            data = self.key_path.read_bytes()
            return serialization.load_pem_private_key(data, password=None)
        private_key = Ed25519PrivateKey.generate()
        self.key_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        return private_key

    def _load_prev_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": self._load_prev_hash(),
        }
        message = _encode(payload)
        signature = self._load_private_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        return file_path

    def verify(self, path: os.PathLike[str] | str) -> bool:
        """Check the signature and chain hash of the record at ``path``."""

        data = json.loads(Path(path).read_text())
        payload = _encode(data["payload"])
        signature = bytes.fromhex(data.get("signature") or "")
        public_key = self._load_private_key().public_key()
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
        return expected_chain_hash == data.get("chain_hash")


__all__ = ["AuditLog", "GENESIS"]
