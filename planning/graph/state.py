"""
Pipeline state schema.

Defines the state that flows through the planning pipeline graph, carrying
the raw input and a handoff slot for each stage's output.
"""

from typing import TypedDict, List, Optional, Annotated
import operator


class PipelineState(TypedDict):
    """
    State schema for the planning pipeline.

    Stage outputs are stored as plain dicts (``model_dump(mode="json")``)
    so the state stays serializable.
    """

    # Request input
    travel_input: dict
    home_location: Optional[dict]

    # Validation stage
    validation: Optional[dict]
    completeness_score: Optional[int]
    incomplete_analysis: Optional[dict]
    follow_up_questions: Optional[List[dict]]
    normalized_input: Optional[dict]

    # Planning and estimation stages
    trip_plan: Optional[dict]
    cost_estimate: Optional[dict]

    # Pipeline tracking
    current_stage: str
    errors: Annotated[List[str], operator.add]
    messages: Annotated[List[dict], operator.add]

    # Session tracking
    session_id: Optional[str]
