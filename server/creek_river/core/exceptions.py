"""Custom exceptions following RFC 9457 Problem Details for HTTP APIs."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

INVALID_DATA_DETAIL = "Invalid data submitted"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


class ProblemDetailsException(HTTPException):
    """
    Base exception class following RFC 9457 Problem Details for HTTP APIs.

    https://tools.ietf.org/rfc/rfc9457.txt
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        instance: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize Problem Details exception.

        Args:
            status_code: HTTP status code
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            type_uri: URI reference that identifies the problem type
            instance: URI reference that identifies the specific occurrence
            extensions: Additional problem-specific information
            headers: HTTP headers to include in response
        """
        self.status_code = status_code
        self.title = title
        self.type_uri = type_uri or f"about:blank#{status_code}"
        self.instance = instance
        self.extensions = extensions or {}

        self.problem_details = {
            "type": self.type_uri,
            "title": self.title,
            "status": self.status_code,
        }

        if detail:
            self.problem_details["detail"] = detail

        if self.instance:
            self.problem_details["instance"] = self.instance

        self.problem_details.update(self.extensions)

        super().__init__(
            status_code=status_code,
            detail=self.problem_details,
            headers=headers
        )


class NotFoundError(ProblemDetailsException):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions = {
            "resource_type": resource_type,
        }
        if resource_id:
            extensions["resource_id"] = resource_id

        super().__init__(
            status_code=404,
            title="Resource Not Found",
            detail=detail,
            type_uri="https://creekriver.example.com/problems/resource-not-found",
            instance=instance,
            extensions=extensions,
        )


class ServiceUnavailableError(ProblemDetailsException):
    """Exception raised when a backing dependency cannot be reached."""

    def __init__(self, dependency: str, detail: Optional[str] = None):
        super().__init__(
            status_code=503,
            title="Service Unavailable",
            detail=detail or f"Dependency '{dependency}' is not reachable",
            type_uri="https://creekriver.example.com/problems/service-unavailable",
            extensions={"dependency": dependency},
        )


# Persistence constraint violations

class ConstraintViolationError(ProblemDetailsException):
    """
    The database rejected a write because it violates a constraint.

    Every variant answers 400 with the same generic detail message; the
    ``code`` extension tells the variants apart.
    """

    code = "CONSTRAINT_VIOLATION"
    title = "Constraint Violation"
    slug = "constraint-violation"

    def __init__(
        self,
        resource_type: str,
        constraint: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        extensions = {
            "code": self.code,
            "resource_type": resource_type,
            "retryable": False,
        }
        if constraint:
            extensions["constraint"] = constraint

        super().__init__(
            status_code=400,
            title=self.title,
            detail=INVALID_DATA_DETAIL,
            type_uri=f"https://creekriver.example.com/problems/{self.slug}",
            instance=instance,
            extensions=extensions,
        )


class ForeignKeyViolationError(ConstraintViolationError):
    """A referenced row (campsite, user profile, campsite type) does not exist."""

    code = "FOREIGN_KEY_VIOLATION"
    title = "Foreign Key Violation"
    slug = "foreign-key-violation"


class UniqueConstraintViolationError(ConstraintViolationError):
    code = "UNIQUE_VIOLATION"
    title = "Unique Constraint Violation"
    slug = "unique-violation"


class CheckConstraintViolationError(ConstraintViolationError):
    code = "CHECK_VIOLATION"
    title = "Check Constraint Violation"
    slug = "check-violation"


class NotNullViolationError(ConstraintViolationError):
    code = "NOT_NULL_VIOLATION"
    title = "Not Null Violation"
    slug = "not-null-violation"


# PostgreSQL SQLSTATE codes for integrity violations
_SQLSTATE_VARIANTS = {
    "23503": ForeignKeyViolationError,
    "23505": UniqueConstraintViolationError,
    "23514": CheckConstraintViolationError,
    "23502": NotNullViolationError,
}

# Message fragments emitted by SQLite and PostgreSQL drivers
_MESSAGE_VARIANTS = (
    ("foreign key", ForeignKeyViolationError),
    ("unique", UniqueConstraintViolationError),
    ("duplicate key", UniqueConstraintViolationError),
    ("check constraint", CheckConstraintViolationError),
    ("not null", NotNullViolationError),
    ("not-null", NotNullViolationError),
)


def _constraint_name(orig: Any) -> Optional[str]:
    name = getattr(orig, "constraint_name", None)
    if name:
        return name
    diag = getattr(orig, "diag", None)
    return getattr(diag, "constraint_name", None)


def classify_integrity_error(exc: IntegrityError, resource_type: str) -> ConstraintViolationError:
    """
    Map a driver-level integrity error onto a structured constraint violation.

    Args:
        exc: IntegrityError raised by SQLAlchemy on flush/commit
        resource_type: Name of the resource being written

    Returns:
        ConstraintViolationError: The most specific matching variant
    """
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    variant = _SQLSTATE_VARIANTS.get(sqlstate) if sqlstate else None

    if variant is None:
        message = str(orig).lower()
        for fragment, candidate in _MESSAGE_VARIANTS:
            if fragment in message:
                variant = candidate
                break
        else:
            variant = ConstraintViolationError

    return variant(resource_type=resource_type, constraint=_constraint_name(orig))


async def problem_details_handler(request: Request, exc: ProblemDetailsException) -> JSONResponse:
    """
    Exception handler for Problem Details exceptions.

    Args:
        request: FastAPI request object
        exc: Problem Details exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    content = dict(exc.problem_details)
    content.setdefault("instance", request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
        media_type="application/problem+json",
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request body/path validation failures as Problem Details."""
    violations = [
        {
            "path": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=422,
        content={
            "type": "https://creekriver.example.com/problems/validation-error",
            "title": "Validation Error",
            "status": 422,
            "detail": "The request data failed validation",
            "instance": request.url.path,
            "violations": violations,
        },
        media_type="application/problem+json",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Generic exception handler that converts unhandled exceptions to Problem Details format.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception",
        extra={"error_id": error_id, "path": request.url.path, "error": str(exc)},
        exc_info=exc,
    )

    problem_details = {
        "type": "https://creekriver.example.com/problems/internal-server-error",
        "title": "Internal Server Error",
        "status": 500,
        "detail": "An unexpected error occurred while processing the request",
        "instance": str(request.url),
        "error_id": error_id,
        "timestamp": _utc_timestamp(),
    }

    return JSONResponse(
        status_code=500,
        content=problem_details,
        media_type="application/problem+json",
    )
