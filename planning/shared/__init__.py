"""
Shared infrastructure for all components.

Modules:
- schemas: Input value models
- contracts: Output contracts
- errors: InvalidInputError
- clock: Injectable source of "now"
- settings: Environment-driven settings
- logging: Structured logging
- api: Response envelope and exception handlers
"""

from planning.shared.clock import Clock, FixedClock, SystemClock, SYSTEM_CLOCK
from planning.shared.errors import InvalidInputError

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "SYSTEM_CLOCK",
    "InvalidInputError",
]
