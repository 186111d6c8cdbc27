"""Error Hierarchy: typed, categorized exceptions for every boundary failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The pipeline itself raises nothing; errors originate at the boundary
    - InvalidInputError always carries at least one human-readable reason
    - to_response() produces the REST envelope shared by HTTP, MCP and CLI

Design Decisions:
    - Single hierarchy with PromptEnhancerError base: one global handler per transport
    - ExecutionFailedError chains the original exception (raise ... from) and only
      surfaces its message, never its traceback
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None


class PromptEnhancerError(Exception):
    """Base exception for all prompt enhancer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

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
                    "tool_name": self.context.tool_name,
                },
            }
        }


# ─── Boundary Errors (400-level) ────────────────────────────────

class InvalidInputError(PromptEnhancerError):
    """Prompt or options failed validation. The pipeline did not run."""
    def __init__(self, reasons: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid input: {'; '.join(reasons)}",
            "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reasons = reasons

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["reasons"] = list(self.reasons)
        return response


class UnknownToolError(PromptEnhancerError):
    """Requested tool is not registered."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_name = tool_name
        super().__init__(
            f"Tool '{tool_name}' does not exist.",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class ExecutionFailedError(PromptEnhancerError):
    """Unexpected failure inside a tool handler."""
    def __init__(self, cause: BaseException, context: ErrorContext | None = None):
        super().__init__(
            f"Execution failed: {cause}",
            "EXECUTION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.cause = cause
