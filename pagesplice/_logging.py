import hashlib
import logging
from typing import Any

# Library logger; applications opt in by configuring "pagesplice"
logger = logging.getLogger("pagesplice")
logger.addHandler(logging.NullHandler())


def redact_key(key: Any) -> str:
    """
    Hashes partition key values so logs can be correlated without exposing them.

    A dict keeps its attribute names and has each value hashed; anything else
    is hashed as a whole.
    """
    try:
        if isinstance(key, dict):
            return str({k: _digest(v) for k, v in key.items()})
        return _digest(key)
    except Exception:
        return "<redaction_failed>"


def _digest(value: Any) -> str:
    return hashlib.sha256(str(value).encode("utf-8")).hexdigest()[:8]


def window_context(origin: str, offset: int, count: int, direction: Any, **extra: Any) -> dict:
    """The `extra` dict logged with every window an origin serves."""
    context = {
        "origin": origin,
        "offset": offset,
        "count": count,
        "direction": getattr(direction, "value", direction),
    }
    context.update(extra)
    return context
