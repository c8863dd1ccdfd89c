"""Digest helpers for audit reports."""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modulith_audit.models.audit import AuditReport

DIGEST_LENGTH = 16


def compute_hash(data: bytes, algorithm: str = "sha256") -> str:
    """Compute hash of bytes data.

    Args:
        data: Bytes to hash
        algorithm: Hash algorithm to use

    Returns:
        Hex digest of the hash
    """
    hasher = hashlib.new(algorithm)
    hasher.update(data)
    return hasher.hexdigest()


def hash_dict(data: dict[str, Any], algorithm: str = "sha256") -> str:
    """Compute hash of a dictionary.

    The dictionary is serialized to JSON with sorted keys for consistency.
    """
    serialized = json.dumps(data, sort_keys=True, default=str)
    return compute_hash(serialized.encode("utf-8"), algorithm)


def report_digest(report: "AuditReport") -> str:
    """Certification identifier of an audit report.

    The timestamp is left out, so two runs over an unchanged project
    produce the same digest.
    """
    payload = report.model_dump(mode="json", exclude={"timestamp"})
    return hash_dict(payload)[:DIGEST_LENGTH]
