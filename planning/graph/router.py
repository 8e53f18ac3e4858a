"""
Routing logic for the planning pipeline.

Determines which stage to run next based on what has been populated.
"""

import logging
from typing import Literal

from planning.graph.state import PipelineState


logger = logging.getLogger(__name__)

Stage = Literal["validate_node", "plan_node", "estimate_node", "complete"]


def route_next_stage(state: PipelineState) -> Stage:
    """
    Determine the next stage based on populated state.

    Routing logic:
    1. If any stage failed -> complete
    2. If validation is missing -> validate
    3. If the input is invalid -> complete (validation gates planning)
    4. If the trip plan is missing -> plan
    5. If a home location is known and no estimate exists -> estimate
    6. Otherwise -> complete

    Args:
        state: Current pipeline state

    Returns:
        Name of the next node to execute
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=pipeline] [router=route_next_stage] "

    validation = state.get("validation")
    has_plan = state.get("trip_plan") is not None
    has_estimate = state.get("cost_estimate") is not None
    has_home = state.get("home_location") is not None
    summary = (
        f"validated={validation is not None}, plan={has_plan}, "
        f"estimate={has_estimate}, home={has_home}"
    )

    if state.get("errors"):
        logger.info(f"{_log}Routing to 'complete' after errors | {summary}")
        return "complete"

    if validation is None:
        logger.info(f"{_log}Routing to 'validate_node' | {summary}")
        return "validate_node"

    if not validation.get("is_valid"):
        logger.info(f"{_log}Routing to 'complete' (input invalid) | {summary}")
        return "complete"

    if not has_plan:
        logger.info(f"{_log}Routing to 'plan_node' | {summary}")
        return "plan_node"

    if has_home and not has_estimate:
        logger.info(f"{_log}Routing to 'estimate_node' | {summary}")
        return "estimate_node"

    logger.info(f"{_log}Routing to 'complete' | {summary}")
    return "complete"
