"""Error Hierarchy — typed, categorized exceptions for all Antifragile failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Conversion errors carry the rejected input on `.value` for diagnostics
    - Classification itself has no error kind: payoff failures propagate untouched
    - to_response() produces a JSON-safe error envelope

Design Decisions:
    - Single hierarchy with AntifragileError base: callers can catch everything at one seam
    - Conversion errors also subclass ValueError: pydantic validators surface them
      as ValidationError without a translation layer (ADR: serialization reuses parsing)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class AntifragileError(Exception):
    """Base exception for all Antifragile errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Conversion Errors ───────────────────────────────────────────

class InvalidTriadValue(AntifragileError, ValueError):
    """Numeric value outside {0, 1, 2} given where a Triad byte was expected."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation="triad_from_byte")
        ctx.debug_info = {"value": repr(value)}
        super().__init__(
            f"invalid triad value: {value!r} (expected 0, 1, or 2)",
            "INVALID_TRIAD_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.value = value


class ParseTriadError(AntifragileError, ValueError):
    """String did not match one of the three canonical Triad names."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation="triad_parse")
        ctx.debug_info = {"value": repr(value)}
        super().__init__(
            f"invalid triad string: {value!r} "
            f"(expected \"antifragile\", \"fragile\", or \"robust\")",
            "INVALID_TRIAD_STRING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.value = value


# ─── Configuration Errors ────────────────────────────────────────

class SerializationDisabledError(AntifragileError):
    """Serialization entry point called while serialization_enabled is off."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation=operation)
        super().__init__(
            f"Serialization is disabled (operation: {operation}). "
            f"Set ANTIFRAGILE_SERIALIZATION_ENABLED=true to enable it.",
            "SERIALIZATION_DISABLED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.operation = operation
