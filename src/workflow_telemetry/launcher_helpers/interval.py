"""Sampling interval normalization."""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = "2"


def resolve_interval(raw: Optional[str]) -> str:
    """Return *raw* unchanged when it is a positive integer, else the fallback."""
    if raw is None:
        return DEFAULT_INTERVAL
    text = raw.strip()
    if not text:
        return DEFAULT_INTERVAL
    try:
        value = int(text)
    except ValueError:
        logger.warning("Ignoring non-numeric interval %r; using %ss", raw, DEFAULT_INTERVAL)
        return DEFAULT_INTERVAL
    if value <= 0:
        logger.warning("Ignoring non-positive interval %r; using %ss", raw, DEFAULT_INTERVAL)
        return DEFAULT_INTERVAL
    return text
