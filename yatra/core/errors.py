"""
Error responses.

Every error leaves the API as ``{"error": <message>}``; validation
failures add a ``details`` list of ``{"path", "message", "code"}`` issues.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)


def validation_issues(errors) -> list[dict]:
    """Flatten pydantic errors into path/message/code issues."""
    issues = []
    for err in errors:
        path = list(err.get("loc", ()))
        # Request body errors are located under "body"
        if path and path[0] == "body":
            path = path[1:]
        issues.append({
            "path": path,
            "message": err.get("msg", ""),
            "code": err.get("type", "invalid"),
        })
    return issues


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation failed",
            "details": validation_issues(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI):
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
