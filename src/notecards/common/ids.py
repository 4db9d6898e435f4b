from __future__ import annotations

import random
import string
import time

MS_PER_DAY = 24 * 60 * 60 * 1000

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_RANDOM_LENGTH = 7


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def days_to_ms(days: float) -> int:
    return int(round(days * MS_PER_DAY))


def generate_card_id(now: int | None = None) -> str:
    """Return a fresh card id of the form ``fc-<epoch ms>-<7 base36 chars>``.

    Uniqueness is probabilistic: two ids generated in the same millisecond
    only collide if the random suffixes do.
    """
    stamp = now_ms() if now is None else now
    suffix = "".join(random.choices(_ID_ALPHABET, k=_ID_RANDOM_LENGTH))
    return f"fc-{stamp}-{suffix}"
