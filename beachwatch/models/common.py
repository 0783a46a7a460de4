"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

BeachKey: TypeAlias = str


def utc_now() -> datetime:
    return datetime.now(UTC)
