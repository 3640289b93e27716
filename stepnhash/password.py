from __future__ import annotations

import hashlib
import logging
import operator
import time
from typing import MutableSequence, Optional

from .checksum import BytesLike, hash_code, to_bytes
from .encoding import encode
from .random_utils import JavaRandom

logger = logging.getLogger(__name__)

SALT = b"helloSTEPN"
SEPARATOR = b"_"


class ClockError(RuntimeError):
    """The wall clock (or a supplied timestamp) is before the Unix epoch."""


def current_millis() -> int:
    millis = time.time_ns() // 1_000_000
    if millis < 0:
        raise ClockError("Time went backwards")
    return millis


def check_timestamp(timestamp_ms: int) -> int:
    """Return ``timestamp_ms`` as an int, rejecting floats and pre-epoch values."""
    timestamp_ms = operator.index(timestamp_ms)
    if timestamp_ms < 0:
        raise ClockError(f"timestamp {timestamp_ms} is before the epoch")
    return timestamp_ms


def build_buffer(password: BytesLike, timestamp_ms: int) -> bytearray:
    """``sha256(password + SALT)`` as lowercase hex, ``_``, then the timestamp digits."""
    timestamp_ms = check_timestamp(timestamp_ms)

    digest = hashlib.sha256(to_bytes(password) + SALT).hexdigest()

    data = bytearray(digest.encode("ascii"))
    data += SEPARATOR
    data += str(timestamp_ms).encode("ascii")
    return data


def encode_with_seed(data: MutableSequence[int], seed: int) -> str:
    """Shuffle ``data`` in place with a generator seeded by ``seed``, then encode it."""
    rng = JavaRandom.with_seed(seed)
    rng.shuffle(data)
    return encode(data)


def hash_password(
    email: BytesLike,
    password: BytesLike,
    timestamp_ms: Optional[int] = None,
) -> str:
    """Build the login token the STEPN service expects for ``email``/``password``.

    - The email checksum seeds the shuffle.
    - The buffer is the salted password digest plus the timestamp.
    - ``timestamp_ms`` defaults to the current time; pass it to get a
      reproducible token.
    """
    if timestamp_ms is None:
        timestamp_ms = current_millis()

    seed = hash_code(email)
    data = build_buffer(password, timestamp_ms)
    logger.debug("hashing password: buffer_len=%d timestamp_ms=%d", len(data), timestamp_ms)
    return encode_with_seed(data, seed)
