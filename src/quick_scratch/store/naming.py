"""Default scratch filename generation."""

from __future__ import annotations

import random
import re
from datetime import datetime
from typing import Final

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d-%H-%M"
SUFFIX_ALPHABET: Final[str] = "0123456789abcdef"
SUFFIX_LENGTH: Final[int] = 8
DEFAULT_FILENAME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-[0-9a-f]{8}\.(?P<extension>.+)$"
)


def synthesize_default_filename(
    extension: str,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Build '<YYYY-MM-DD-HH-mm>-<8 hex>.<extension>' from local time and a random suffix."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    source = rng or random
    suffix = "".join(source.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{timestamp}-{suffix}.{extension}"
