"""Custom exceptions and error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shadesails.application.config import ConfigError

logger = logging.getLogger(__name__)


class QuoteInputError(Exception):
    """Raised when a direct-entry quote request cannot be priced."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Quote input rejected: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        logger.info(f"{request.url.path}: configuration rejected ({exc.error_type})")
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(QuoteInputError)
    async def quote_input_error_handler(
        request: Request, exc: QuoteInputError
    ) -> JSONResponse:
        logger.info(f"{request.url.path}: quote input rejected")
        return JSONResponse(
            status_code=422,
            content={
                "error": "Quote input is invalid",
                "error_type": "quote_input",
                "details": [{"message": e} for e in exc.errors],
            },
        )
