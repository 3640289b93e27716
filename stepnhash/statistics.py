from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd

from .random_utils import JavaRandom

_DRAW_SPACE = 1 << 31
_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class BiasReport:
    bound: int
    min_count: int
    max_count: int
    relative_bias: float
    is_uniform: bool


def modulo_bias(bound: int) -> BiasReport:
    """Exact spread of ``JavaRandom.next_bound(bound)`` over its 2**31 inputs.

    Powers of two scale the draw and hit every value equally often. Other
    bounds take ``r % bound`` once, so the first ``2**31 % bound`` values get
    one extra hit, and bounds above 2**31 never produce the top values.
    """
    if not (0 < bound <= _UINT32_MAX):
        raise ValueError("bound must be between 1 and 2**32 - 1")

    if bound & (bound - 1) == 0:
        min_count = max_count = _DRAW_SPACE // bound
    else:
        q, rem = divmod(_DRAW_SPACE, bound)
        min_count = q
        max_count = q + 1 if rem else q

    if min_count == 0:
        relative_bias = math.inf
    else:
        relative_bias = max_count / min_count - 1

    return BiasReport(
        bound=bound,
        min_count=min_count,
        max_count=max_count,
        relative_bias=relative_bias,
        is_uniform=min_count == max_count,
    )


def draw_frequencies(seed: int, bound: int, draws: int) -> pd.DataFrame:
    """Empirical counts of ``draws`` bounded draws from a seeded generator."""
    if draws <= 0:
        raise ValueError("draws must be > 0")

    rng = JavaRandom.with_seed(seed)
    values = [rng.next_bound(bound) for _ in range(draws)]

    df = pd.Series(values, name="value").value_counts().rename("count").reset_index()
    df.columns = ["value", "count"]
    df["share"] = df["count"] / draws
    return df.sort_values("value").reset_index(drop=True)
