from __future__ import annotations

import pytest

from synth_dashboard.core.dataset import COLUMNS, Dataset, MetricRecord
from synth_dashboard.core.errors import InvalidPeriod
from synth_dashboard.core.periods import PERIODS, validate_period


def _records(periods=PERIODS):
    return tuple(
        MetricRecord(
            period=p,
            real_accuracy=0.81,
            synthetic_accuracy=0.86,
            threats_detected=i,
        )
        for i, p in enumerate(periods)
    )


def test_validate_period():
    assert validate_period("March") == "March"

    with pytest.raises(InvalidPeriod) as exc:
        validate_period("Smarch")
    assert exc.value.period == "Smarch"

    with pytest.raises(InvalidPeriod):
        validate_period(3)


def test_dataset_requires_every_period_in_order():
    Dataset(records=_records())

    with pytest.raises(ValueError):
        Dataset(records=_records(PERIODS[:11]))

    with pytest.raises(ValueError):
        Dataset(records=_records(tuple(reversed(PERIODS))))

    with pytest.raises(ValueError):
        Dataset(records=_records(PERIODS[:11] + ("January",)))


def test_dataset_records_roundtrip():
    ds = Dataset(records=_records())

    raw = ds.to_records()
    assert list(raw[0].keys()) == list(COLUMNS)
    assert raw[2] == {
        "period": "March",
        "realAccuracy": 0.81,
        "syntheticAccuracy": 0.86,
        "threatsDetected": 2,
    }

    assert Dataset.from_records(raw) == ds


def test_dataset_to_frame_keeps_order():
    df = Dataset(records=_records()).to_frame()

    assert list(df.columns) == list(COLUMNS)
    assert list(df["period"]) == list(PERIODS)
    assert list(df["threatsDetected"]) == list(range(12))


def test_from_records_rejects_unknown_period():
    raw = Dataset(records=_records()).to_records()
    raw[0]["period"] = "Smarch"

    with pytest.raises(InvalidPeriod):
        Dataset.from_records(raw)
