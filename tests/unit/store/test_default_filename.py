from __future__ import annotations

import random
import re
from datetime import datetime

from quick_scratch.store import DEFAULT_FILENAME_PATTERN, synthesize_default_filename

NAME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-[0-9a-f]{8}\.md")


def test_default_filename_matches_expected_shape() -> None:
    for _ in range(50):
        name = synthesize_default_filename("md")
        assert NAME_SHAPE.fullmatch(name), name
        match = DEFAULT_FILENAME_PATTERN.match(name)
        assert match is not None
        assert match.group("extension") == "md"


def test_default_filename_uses_local_minute_timestamp() -> None:
    name = synthesize_default_filename(
        "txt",
        now=datetime(2026, 3, 7, 9, 5, 59),
        rng=random.Random(1234),
    )

    assert name.startswith("2026-03-07-09-05-")
    assert name.endswith(".txt")
    assert len(name) == len("2026-03-07-09-05-") + 8 + len(".txt")


def test_same_seed_gives_same_suffix_and_different_seeds_differ() -> None:
    moment = datetime(2026, 3, 7, 9, 5)
    first = synthesize_default_filename("md", now=moment, rng=random.Random(7))
    again = synthesize_default_filename("md", now=moment, rng=random.Random(7))
    other = synthesize_default_filename("md", now=moment, rng=random.Random(8))

    assert first == again
    assert first != other


def test_names_within_one_minute_are_distinct() -> None:
    moment = datetime(2026, 3, 7, 9, 5)
    names = {synthesize_default_filename("md", now=moment) for _ in range(200)}

    assert len(names) == 200
