# This package holds the investment domain: the ROI rule, the record model, form parsing,
# and portfolio roll-ups. Nothing here performs I/O.

__all__ = ["models", "portfolio", "roi_classifier", "validation"]
