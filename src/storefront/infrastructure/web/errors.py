"""Maps domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainException,
    EmptyCartError,
    EntityNotFoundError,
    PaymentDeclinedError,
    ValidationError,
)

_STATUS_CODES: dict[type[DomainException], int] = {
    ValidationError: 400,
    EmptyCartError: 400,
    AuthenticationError: 401,
    AuthorizationError: 401,
    PaymentDeclinedError: 402,
    EntityNotFoundError: 404,
}


def status_code_for(exc: DomainException) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in _STATUS_CODES:
            return _STATUS_CODES[exc_type]
    return 400


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(exc), content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
