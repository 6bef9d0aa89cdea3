"""Prefixed ID generation utility."""

import uuid


def generate_id(prefix: str) -> str:
    """Generate a prefixed unique ID such as ``run_a1b2c3d4e5f6a7b8``.

    Prefixes in use: ``run_`` for analysis runs, ``whk_`` for webhooks.
    """
    return f"{prefix}{uuid.uuid4().hex[:16]}"
