from __future__ import annotations

from typing import Optional

import numpy as np

from .dataset import Dataset, MetricRecord
from .periods import PERIODS

REAL_ACCURACY_RANGE = (0.8, 0.9)
SYNTHETIC_ACCURACY_RANGE = (0.85, 0.90)
THREATS_RANGE = (0, 100)


def _uniform(rng: np.random.Generator, low: float, high: float) -> float:
    # numpy's uniform can round up to `high`; keep the interval half-open
    value = float(rng.uniform(low, high))
    if value >= high:
        value = float(np.nextafter(high, low))
    return value


def generate_dataset(rng: Optional[np.random.Generator] = None) -> Dataset:
    """
    Build a new Dataset with one record per period, in period order.

    Values are random but always within their declared half-open ranges.

    :param rng: random generator to draw from; a fresh unseeded one is used if None
    :return: the new Dataset
    """
    rng = rng if rng is not None else np.random.default_rng()

    records = [
        MetricRecord(
            period=period,
            real_accuracy=_uniform(rng, *REAL_ACCURACY_RANGE),
            synthetic_accuracy=_uniform(rng, *SYNTHETIC_ACCURACY_RANGE),
            threats_detected=int(rng.integers(*THREATS_RANGE)),
        )
        for period in PERIODS
    ]
    return Dataset(records=tuple(records))
