"""Domain error classes.

Protocol-agnostic errors that represent back office business failures.
Protocol adapters (HTTP today) translate them into their own formats.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus free-form context that
    adapters may echo back to the caller.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context (e.g., resource ids, statuses)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Input or business rule validation error.

    The caller must correct its input; retrying as-is will fail again.

    Examples:
        - Listing references a brand missing from the filter catalog
        - price_min > price_max in a search
        - Closing an inquiry without a closure report

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "year", "message": "Must be >= 1980"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Error messages keyed by field name."""
        keyed: dict[str, list[str]] = {}
        for error in self.errors or []:
            keyed.setdefault(error["field"], []).append(error["message"])
        return keyed

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Listing with ID not found
        - Inquiry already deleted
        - Brand missing from the filter catalog

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "Inquiry")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Filter catalog changed since the caller read it
        - Approving a listing that was already rejected
        - Assigning a closed inquiry

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class InvalidTransition(ConflictError):
    """A status change the entity's state machine does not allow."""

    def __init__(self, entity: str, current: str, target: str, **context: Any) -> None:
        super().__init__(
            f"{entity} cannot move from '{current}' to '{target}'",
            entity=entity,
            current_status=current,
            target_status=target,
            **context,
        )


class UnauthorizedError(DomainError):
    """Caller identity missing or unknown to the actor directory.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Known actor whose role lacks the capability for the operation.

    Protocol mappings:
        - REST: 403 Forbidden
    """

    error_code: str = "FORBIDDEN"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class CascadeFailedError(InternalError):
    """Dependent records could not be removed, so the parent was kept.

    Safe to retry. A repeating failure points at a stuck dependent record
    and needs an operator.
    """

    error_code: str = "CASCADE_FAILED"
