"""
Application errors surfaced to GraphQL clients.

Each error carries a ``code`` and an ``extensions`` mapping. graphql-core
copies the ``extensions`` of the original exception onto the located
GraphQL error, so these end up in the ``errors`` entry of the response
next to a partial result.
"""

from typing import Any, Optional

from pydantic import ValidationError


# Keys never echoed back in error payloads
SECRET_ARGUMENTS = frozenset({"password"})


def public_arguments(args: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Drop secrets from submitted arguments."""
    if not args:
        return {}
    return {
        key: value
        for key, value in args.items()
        if key not in SECRET_ARGUMENTS
    }


class AppError(Exception):
    """Base class for errors reported in GraphQL responses."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, **extensions: Any):
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code, **extensions}


class InputValidationError(AppError):
    """Constraint violation, invalid input or unknown target record."""

    code = "BAD_USER_INPUT"

    def __init__(
        self,
        message: str,
        invalid_args: Optional[dict[str, Any]] = None,
        errors: Optional[list[dict[str, str]]] = None,
    ):
        extensions: dict[str, Any] = {"invalidArgs": public_arguments(invalid_args)}
        if errors:
            extensions["errors"] = errors
        super().__init__(message, **extensions)
        self.invalid_args = extensions["invalidArgs"]

    @classmethod
    def from_validation_error(
        cls,
        exc: ValidationError,
        invalid_args: Optional[dict[str, Any]] = None,
    ) -> "InputValidationError":
        """Build from a pydantic error, one entry per offending field."""
        errors = []
        for error in exc.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field,
                "message": error["msg"],
                "type": error["type"],
            })
        message = "; ".join(
            f"{error['field']}: {error['message']}" if error["field"] else error["message"]
            for error in errors
        )
        return cls(message, invalid_args=invalid_args, errors=errors)


class AuthenticationError(AppError):
    """Protected operation attempted without a valid session."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "not authenticated"):
        super().__init__(message)


class CredentialsError(AppError):
    """Login failure. The message never says which credential was wrong."""

    code = "UNAUTHENTICATED"
    MESSAGE = "wrong credentials"

    def __init__(self):
        super().__init__(self.MESSAGE)


class ReferenceNotFoundError(AppError):
    """A stored reference points to a record that does not exist."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} {record_id} not found", kind=kind, id=record_id)
