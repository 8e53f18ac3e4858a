"""
Error types raised by the planning core.

The core raises exactly one error kind: ``InvalidInputError``, when a
required collection or value is structurally absent. Everything else
degrades to table defaults, and validation reports problems through
result objects instead of raising.
"""

from typing import Any, Dict, Optional


class InvalidInputError(ValueError):
    """
    A required input is missing or empty.

    Raised before any computation starts. Carries field-level context so
    the HTTP layer can surface it verbatim.

    Attributes:
        message: Human-readable description
        field: Name of the offending input field
        code: Machine-readable error code
        status_code: HTTP status the boundary layer should use
        details: Extra diagnostic context
    """

    code = "INVALID_INPUT"
    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``error`` member of the response envelope."""
        details = dict(self.details)
        if self.field is not None:
            details.setdefault("field", self.field)
        return {"message": self.message, "code": self.code, "details": details}
