# Standard library imports
from typing import Dict, TypeVar

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...application.result import AccountErrorKind, UseCaseResult

T = TypeVar("T")

ERROR_STATUS: Dict[AccountErrorKind, int] = {
    AccountErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    AccountErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    AccountErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    AccountErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def unwrap_result(result: UseCaseResult[T]) -> T:
    """
    Return the success value or raise the HTTPException matching the error tag

    Args:
        result: Outcome of a use case

    Returns:
        The success value

    Raises:
        HTTPException: With the status mapped from the error kind and the
            error message as detail
    """
    if result.error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS[result.error.kind],
            detail=result.error.message,
        )
    return result.value
