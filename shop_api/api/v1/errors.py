# Standard library imports
import logging
from typing import Callable, Dict, Tuple

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...application.use_cases.auth.login_user import INVALID_CREDENTIALS
from .users_controller import login_user

logger = logging.getLogger(__name__)

INVALID_USER_DATA = "Invalid user data"

# Login rejects any malformed body exactly like a failed credential check
REJECTIONS: Dict[Callable, Tuple[int, str]] = {
    login_user: (status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS),
}


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Collapse body validation errors into the route's generic failure

    Field-level details stay in the server log.
    """
    status_code, message = REJECTIONS.get(
        request.scope.get("endpoint"),
        (status.HTTP_400_BAD_REQUEST, INVALID_USER_DATA),
    )
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
    logger.info(f"Rejected {request.method} {request.url.path}: invalid {', '.join(fields)}")
    return JSONResponse(status_code=status_code, content={"detail": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
