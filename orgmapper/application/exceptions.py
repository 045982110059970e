"""Application layer exceptions."""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of error."""
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class MappingError(ApplicationError):
    """Base exception for errors raised by the mapping engine."""


class MappingDefinitionError(MappingError):
    """Raised when a mapping definition is rejected at registration."""

    def __init__(
        self,
        message: str,
        source_type: Optional[type] = None,
        target_type: Optional[type] = None,
        field: Optional[str] = None,
    ):
        """
        Initialize mapping definition error.

        Args:
            message: Human-readable error message
            source_type: Source type of the rejected definition
            target_type: Target type of the rejected definition
            field: Target field of the offending rule
        """
        details = {}
        if source_type is not None:
            details["source_type"] = source_type.__name__
        if target_type is not None:
            details["target_type"] = target_type.__name__
        if field:
            details["field"] = field

        super().__init__(message, "INVALID_MAPPING_DEFINITION", details)


class UnmappedTypeError(MappingError):
    """Raised when no mapping is registered for a source/target pair."""

    def __init__(self, source_type: type, target_type: Optional[type] = None):
        details = {"source_type": source_type.__name__}
        if target_type is not None:
            details["target_type"] = target_type.__name__
            message = f"No mapping registered from {source_type.__name__} to {target_type.__name__}"
        else:
            message = f"No mapping registered for {source_type.__name__}"

        super().__init__(message, "UNMAPPED_TYPE", details)


class UnknownTargetFieldError(MappingError):
    """Raised when a hook or rule writes a field the target does not declare."""

    def __init__(self, target_type: type, field: str):
        super().__init__(
            f"{target_type.__name__} has no field '{field}'",
            "UNKNOWN_TARGET_FIELD",
            {"target_type": target_type.__name__, "field": field},
        )


class HookExecutionError(MappingError):
    """Raised when a before or after mapping hook fails."""

    def __init__(self, phase: str, hook_name: str, source_type: type, reason: str):
        """
        Initialize hook execution error.

        Args:
            phase: Hook phase ("before" or "after")
            hook_name: Qualified name of the failing hook
            source_type: Type of the object being mapped
            reason: Message of the underlying exception
        """
        self.phase = phase
        self.hook_name = hook_name
        super().__init__(
            f"{phase.capitalize()}-mapping hook '{hook_name}' failed: {reason}",
            "HOOK_FAILED",
            {"phase": phase, "hook": hook_name, "source_type": source_type.__name__},
        )


class TargetConstructionError(MappingError):
    """Raised when the collected field values do not form a valid target."""

    def __init__(self, target_type: type, reason: str):
        super().__init__(
            f"Could not build {target_type.__name__}: {reason}",
            "TARGET_CONSTRUCTION_FAILED",
            {"target_type": target_type.__name__},
        )
