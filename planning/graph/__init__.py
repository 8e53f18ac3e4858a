"""
Planning pipeline graph.

Chains the components for a single request:
    travel input -> validate -> plan -> estimate -> done

Planning only runs on valid input; estimation only runs when a home
location is known.
"""

from planning.graph.build import create_pipeline_graph, run_pipeline

__all__ = ["create_pipeline_graph", "run_pipeline"]
