"""
Graph configuration for the planning pipeline.
"""

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """
    Configuration for the pipeline graph.

    Attributes:
        recursion_limit: Maximum number of graph steps
        apply_travel_style: Rescale the trip estimate by the traveller's style
    """

    recursion_limit: int = 10
    apply_travel_style: bool = True


# Default configuration instance
DEFAULT_CONFIG = PipelineConfig()
