from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from .password import check_timestamp, current_millis, hash_password

logger = logging.getLogger(__name__)


def _cell(value):
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        return value
    if pd.isna(value):
        return ""
    return str(value)


def hash_frame(
    df: pd.DataFrame,
    email_col: str = "email",
    password_col: str = "password",
    timestamp_ms: Optional[int] = None,
) -> pd.DataFrame:
    """Compute a token for every row of ``df``.

    - All rows share one timestamp, read once when not given.
    - str and bytes cells are hashed as-is, missing cells as empty.
    - The password column is dropped from the result.

    Returns a copy of ``df`` with ``timestamp_ms`` and ``token`` columns.
    """
    missing = [c for c in (email_col, password_col) if c not in df.columns]
    if missing:
        raise ValueError(f"missing columns: {', '.join(missing)}")

    if timestamp_ms is None:
        timestamp_ms = current_millis()
    timestamp_ms = check_timestamp(timestamp_ms)

    out = df.copy()
    tokens = [
        hash_password(_cell(email), _cell(password), timestamp_ms=timestamp_ms)
        for email, password in zip(out[email_col], out[password_col])
    ]
    logger.debug("hashed %d rows at timestamp_ms=%d", len(tokens), timestamp_ms)

    out = out.drop(columns=[password_col])
    out["timestamp_ms"] = timestamp_ms
    out["token"] = tokens
    return out.reset_index(drop=True)
