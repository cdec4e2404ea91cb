# This file defines help text for the dashboard metrics and the investment form.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "project_count_card": "Number of projects you are currently tracking.",
    "validated_count_card": "Projects whose expected revenue exceeds their cost, giving a strictly positive ROI.",
    "burning_count_card": "Projects whose ROI is zero or negative.",
    "total_cost_card": "Sum of investment cost across all projects.",
    "total_revenue_card": "Sum of expected revenue across all projects.",
    "roi_formula": "ROI = (revenue - cost) / cost x 100. Only a result above 0% counts as validated.",
    "cost_input": "What the project costs you up front.",
    "revenue_input": "What you expect the project to bring in.",
}
