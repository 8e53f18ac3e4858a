"""
Region classification shared by the estimator and the planner.
"""

from planning.regions.classifier import (
    REGION_ORDER,
    Region,
    classify_region,
    same_country,
)

__all__ = ["REGION_ORDER", "Region", "classify_region", "same_country"]
