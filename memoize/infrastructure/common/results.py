"""Translation of failed service results into HTTP-facing errors."""

from typing import TypeVar

from memoize.application.common.errors import ErrorKind, ServiceError
from memoize.application.common.result import Result
from memoize.exceptions import CredentialsException, NotFoundError, ValidationError
from memoize.exceptions import ServiceError as ServiceFailure

T = TypeVar("T")


def to_exception(error: ServiceError) -> Exception:
    """Map a service error to the exception the router raises for it."""
    if error.kind is ErrorKind.NOT_FOUND:
        return NotFoundError(error.message)
    if error.kind is ErrorKind.VALIDATION_FAILED:
        return ValidationError(error.message)
    if error.kind is ErrorKind.UNAUTHORIZED:
        return CredentialsException
    return ServiceFailure(error.message)


def unwrap_or_raise(result: Result[T, ServiceError]) -> T:
    """
    Return the success value, or raise the error matching the failure.

    Raises:
        MemoizeError: NotFoundError (404), ValidationError (400) or ServiceError (500)
        HTTPException: CredentialsException (401)
    """
    if result.is_failure:
        raise to_exception(result.unwrap_error())
    return result.unwrap()

