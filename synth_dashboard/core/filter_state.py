from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Tuple

from .dataset import MetricRecord
from .periods import PERIODS, validate_period

FilteredView = Tuple[MetricRecord, ...]


@dataclass(frozen=True)
class FilterState:
    """
    Represents which periods the user currently has selected.

    Fields:

    - selected: periods that are visible in the charts. Always a subset of PERIODS,
      may be empty or the full enumeration.

    FilterState is immutable: `toggle` returns a new state.
    """

    selected: FrozenSet[str] = frozenset(PERIODS)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "selected", frozenset(validate_period(p) for p in self.selected)
        )

    @classmethod
    def all(cls) -> FilterState:
        return cls(selected=frozenset(PERIODS))

    @classmethod
    def none(cls) -> FilterState:
        return cls(selected=frozenset())

    def is_selected(self, period: str) -> bool:
        return period in self.selected

    def selected_periods(self) -> List[str]:
        """Selected periods in enumeration order."""
        return [p for p in PERIODS if p in self.selected]

    def toggle(self, period: str) -> FilterState:
        """
        Flip the membership of a single period.

        :param period: the period to add or remove
        :return: a new FilterState; other periods keep their membership
        :raises InvalidPeriod: if period is not in PERIODS (self is unchanged)
        """
        validate_period(period)
        if period in self.selected:
            return FilterState(selected=self.selected - {period})
        return FilterState(selected=self.selected | {period})

    def apply(self, records: Iterable[MetricRecord]) -> FilteredView:
        """
        Keep the records whose period is selected, preserving their order.
        """
        return tuple(r for r in records if r.period in self.selected)

    def to_dict(self) -> Dict[str, Any]:
        return {"selected": self.selected_periods()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(selected=frozenset(data.get("selected", PERIODS)))
