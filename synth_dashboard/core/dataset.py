from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

import pandas as pd

from .periods import PERIODS, validate_period

# Column names used for CSV export and chart field mappings, in export order.
COL_PERIOD = "period"
COL_REAL_ACCURACY = "realAccuracy"
COL_SYNTHETIC_ACCURACY = "syntheticAccuracy"
COL_THREATS_DETECTED = "threatsDetected"

COLUMNS: Tuple[str, ...] = (
    COL_PERIOD,
    COL_REAL_ACCURACY,
    COL_SYNTHETIC_ACCURACY,
    COL_THREATS_DETECTED,
)


@dataclass(frozen=True)
class MetricRecord:
    """
    Metrics for a single period.

    Fields:

    - period: one of PERIODS
    - real_accuracy: detection accuracy on real data, in [0.8, 0.9)
    - synthetic_accuracy: detection accuracy on synthetic data, in [0.85, 0.90)
    - threats_detected: number of threats detected, in [0, 100)
    """

    period: str
    real_accuracy: float
    synthetic_accuracy: float
    threats_detected: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            COL_PERIOD: self.period,
            COL_REAL_ACCURACY: self.real_accuracy,
            COL_SYNTHETIC_ACCURACY: self.synthetic_accuracy,
            COL_THREATS_DETECTED: self.threats_detected,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetricRecord:
        return cls(
            period=validate_period(data[COL_PERIOD]),
            real_accuracy=float(data[COL_REAL_ACCURACY]),
            synthetic_accuracy=float(data[COL_SYNTHETIC_ACCURACY]),
            threats_detected=int(data[COL_THREATS_DETECTED]),
        )


@dataclass(frozen=True)
class Dataset:
    """
    Ordered, immutable collection of MetricRecords: exactly one per period, in PERIODS order.

    A Dataset is never mutated in place. Regeneration builds a new one.
    """

    records: Tuple[MetricRecord, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "records", tuple(self.records))

        periods = tuple(r.period for r in self.records)
        if periods != PERIODS:
            raise ValueError(
                f"Dataset must contain exactly one record per period in order {list(PERIODS)}, "
                f"got {list(periods)}"
            )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MetricRecord]:
        return iter(self.records)

    def to_records(self) -> List[Dict[str, Any]]:
        """Records as plain dicts, keyed by export column name."""
        return [r.to_dict() for r in self.records]

    def to_frame(self) -> pd.DataFrame:
        return records_to_frame(self.records)

    @classmethod
    def from_records(cls, data: Iterable[Mapping[str, Any]]) -> Dataset:
        return cls(records=tuple(MetricRecord.from_dict(d) for d in data))


def records_to_frame(records: Iterable[MetricRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record and the export columns, keeping record order."""
    return pd.DataFrame([r.to_dict() for r in records], columns=list(COLUMNS))
