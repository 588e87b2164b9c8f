"""Error Hierarchy - typed, categorized exceptions for all photo album failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every validation error is raised BEFORE any state is touched
    - to_response() produces the REST envelope used by the API shell
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PhotoAlbumError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    shape_name: str | None = None
    snapshot_id: str | None = None
    line_number: int | None = None
    command: str | None = None
    debug_info: dict[str, Any] | None = None


class PhotoAlbumError(Exception):
    """Base exception for all photo album errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "shape_name": self.context.shape_name,
                    "snapshot_id": self.context.snapshot_id,
                    "line_number": self.context.line_number,
                    "command": self.context.command,
                },
            }
        }


# ─── Registry Errors ────────────────────────────────────────────

class DuplicateNameError(PhotoAlbumError):
    """A live shape already uses this name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.shape_name = name
        super().__init__(
            f"Shape '{name}' already exists",
            "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.name = name


class UnknownShapeTypeError(PhotoAlbumError):
    """Shape type is not one of the supported kinds."""
    def __init__(self, shape_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown shape type '{shape_type}' (expected rectangle or oval)",
            "UNKNOWN_SHAPE_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.shape_type = shape_type


class UnknownShapeError(PhotoAlbumError):
    """No live shape with this name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.shape_name = name
        super().__init__(
            f"Shape '{name}' not found",
            "UNKNOWN_SHAPE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.name = name


class UnknownSnapshotError(PhotoAlbumError):
    """No snapshot with this id in the album history."""
    def __init__(self, snapshot_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.snapshot_id = snapshot_id
        super().__init__(
            f"Snapshot '{snapshot_id}' not found",
            "UNKNOWN_SNAPSHOT", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.snapshot_id = snapshot_id


# ─── Shape Validation Errors ────────────────────────────────────

class InvalidColorError(PhotoAlbumError):
    """At least one color component lies outside [0, 1]."""
    def __init__(
        self, r: float, g: float, b: float, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Color components must be between 0 and 1, got ({r}, {g}, {b})",
            "INVALID_COLOR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.components = (r, g, b)


class InvalidDimensionError(PhotoAlbumError):
    """At least one dimension is zero or negative."""
    def __init__(
        self, first: float, second: float, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Dimensions must be positive, got ({first}, {second})",
            "INVALID_DIMENSION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.dimensions = (first, second)


# ─── Command Protocol Errors ────────────────────────────────────

class CommandFormatError(PhotoAlbumError):
    """A command line could not be parsed (bad token, arity, unknown verb)."""
    def __init__(
        self, message: str, line_number: int | None = None,
        command: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.line_number = line_number
        ctx.command = command
        super().__init__(
            message, "FORMAT_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class CommandBatchError(PhotoAlbumError):
    """Terminal error of a halted batch. Wraps the error that stopped it."""
    def __init__(
        self, line_number: int, line: str, cause: PhotoAlbumError,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.line_number = line_number
        ctx.command = line
        super().__init__(
            f"Command batch halted at line {line_number} ({line!r}): {cause.message}",
            "COMMAND_BATCH_HALTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.line_number = line_number
        self.line = line
        self.cause = cause
