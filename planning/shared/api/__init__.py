"""HTTP response envelope shared by all routers."""

from planning.shared.api.envelope import (
    ApiError,
    ApiResponse,
    register_error_handlers,
    success,
)

__all__ = ["ApiError", "ApiResponse", "register_error_handlers", "success"]
