# This file collects the number formatting used on the dashboard.
# Returned strings can be handed straight to Streamlit.

from __future__ import annotations

import math


def format_roi_percent(value: float | None) -> str:
    if value is None or math.isnan(value):
        return "n/a"
    if math.isinf(value):
        return "+∞%" if value > 0 else "-∞%"
    sign = "+" if value > 0 else ""
    return f"{sign}{float(value):.2f}%"


def format_currency(value: float | int | None) -> str:
    if value is None:
        return "-"
    text = f"{float(value):,.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"


def roi_color(is_validated: bool) -> str:
    return "green" if is_validated else "red"
