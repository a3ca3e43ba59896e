from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger(__name__)


class PricingError(Exception):
    code = "PRICING_ERROR"
    status_code = 400

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class InvalidOrderError(PricingError):
    """The order as a whole cannot be priced (e.g. too many lines)."""

    code = "INVALID_ORDER"


def error_body(message: str, code: str) -> dict:
    return {"error": {"message": message, "code": code}}


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


async def pricing_error_handler(request: Request, exc: PricingError):
    logger.warning("pricing_error", path=request.url.path, code=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.code))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_error(exc)
    logger.info("request_rejected", path=request.url.path, reason=message)
    return JSONResponse(status_code=422, content=error_body(message, "VALIDATION_ERROR"))


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(PricingError, pricing_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
