# app/core/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger

logger = get_logger("errors")


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = 404


class MisconfigurationError(AppError):
    """A seeded dependency is missing; the message tells the operator how to fix it."""
    status_code = 500


class StoreError(AppError):
    status_code = 500


class StoreWriteError(AppError):
    """A write the caller can retry with different input; carries the store's own message."""
    status_code = 400


def flatten_validation_errors(errors) -> dict:
    """
    Group pydantic errors into {"formErrors": [...], "fieldErrors": {field: [...]}}.

    Errors located on a body field are keyed by that field; anything else
    (malformed body, missing body) lands in formErrors.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part != "body"]
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(err["msg"])
        else:
            form_errors.append(err["msg"])
    return {"formErrors": form_errors, "fieldErrors": field_errors}


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": flatten_validation_errors(exc.errors())})


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Store operation failed"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
