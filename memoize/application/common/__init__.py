"""
Application common module.

Contains the pieces every service shares:
- Result: Success | Failure outcome of a service call
- ServiceError / ErrorKind: what a Failure carries
"""

from .errors import ErrorKind, ServiceError, store_errors_as_failure
from .result import Failure, Result, Success

__all__ = [
    "ErrorKind",
    "Failure",
    "Result",
    "ServiceError",
    "Success",
    "store_errors_as_failure",
]
