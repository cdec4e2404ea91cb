# This module turns a cost and an expected revenue into an ROI percentage and a verdict.
# Division follows IEEE-754 float rules, so a zero cost yields +inf, -inf, or nan
# instead of raising; callers never see an exception from this module.

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class RoiResult:
    roi_percent: float
    is_validated: bool


def calculate_roi(cost: float, revenue: float) -> float:
    """Return ``((revenue - cost) / cost) * 100`` with IEEE semantics for ``cost == 0``."""

    numerator = np.float64(revenue) - np.float64(cost)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = numerator / np.float64(cost)
    return float(ratio * 100.0)


def classify_roi(cost: float, revenue: float) -> RoiResult:
    roi_percent = calculate_roi(cost, revenue)
    # nan > 0 is False, so an undefined ROI is never validated.
    return RoiResult(roi_percent=roi_percent, is_validated=bool(roi_percent > 0))
