"""Core error models for the application."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    VALIDATION = "validation"
    API_ERROR = "api_error"
    NETWORK = "network"
    TIMEOUT = "timeout"
    PARSING = "parsing"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ErrorKind(str, Enum):
    """The four failure kinds an analysis can end with."""

    VALIDATION = "validation"
    SERVICE = "service"
    RESPONSE_FORMAT = "response_format"
    UNKNOWN = "unknown"


@dataclass
class ErrorContext:
    """Contextual information for errors."""

    error_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)
    component: Optional[str] = None
    operation: Optional[str] = None
    additional_data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StructuredError:
    """Structured error information, used for logging and error reports."""

    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    kind: ErrorKind
    context: ErrorContext
    user_message: str
    original_exception: Optional[Exception] = None

    def to_log_dict(self) -> Dict[str, Any]:
        """Flatten into a dict suitable for the ``extra`` argument of a log call."""
        return {
            "error_id": self.context.error_id,
            "error_kind": self.kind.value,
            "error_category": self.category.value,
            "error_severity": self.severity.value,
            "component": self.context.component,
            "operation": self.context.operation,
        }
