from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricAggregate:
    count: int
    average: float
    peak: float


def _numeric(value: Any) -> Optional[float]:
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def extract_values(samples: Iterable[Mapping[str, Any]], field_name: str) -> List[float]:
    """Collect numeric *field_name* readings, skipping malformed samples."""
    values: List[float] = []
    for index, sample in enumerate(samples):
        number = _numeric(sample.get(field_name))
        if number is None:
            logger.debug("Skipping sample %d without numeric %s", index, field_name)
            continue
        values.append(number)
    return values


def aggregate(values: List[float]) -> Optional[MetricAggregate]:
    if not values:
        return None
    return MetricAggregate(count=len(values), average=sum(values) / len(values), peak=max(values))
