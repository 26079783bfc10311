"""REST API error response models.

Every non-2xx response shares this body so clients branch on ``code``
rather than on message text.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One field-level failure, as produced by listing or form validation."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "model",
                "message": "Unknown model 'Nexonn' for 'Tata'",
                "code": "UNKNOWN_MODEL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    ``code`` values:
    - VALIDATION_ERROR (422), with ``errors`` keyed by field
    - NOT_FOUND (404)
    - UNAUTHORIZED (401) / FORBIDDEN (403)
    - CONFLICT (409): invalid status transition or stale filter catalog
    - CASCADE_FAILED (500): a listing's inquiries could not be deleted, the
      listing was kept and the call is safe to retry
    - INTERNAL_ERROR (500)
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "year",
                            "message": "Must be between 1980 and 2026",
                            "code": "INVALID_YEAR",
                        },
                        {
                            "field": "price",
                            "message": "Must be a positive integer",
                            "code": "NOT_POSITIVE",
                        },
                    ],
                },
            ]
        }
    )
