from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    InsufficientBalanceError,
    InvalidAmountError,
    NotFoundError,
    StoreUnavailableError,
    TransactionStateError,
)


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidAmountError)
    async def invalid_amount_handler(
        request: Request, exc: InvalidAmountError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(InsufficientBalanceError)
    async def insufficient_balance_handler(
        request: Request, exc: InsufficientBalanceError
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logger.error("store.unavailable", extra={"path": request.url.path})
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(TransactionStateError)
    async def transaction_state_handler(
        request: Request, exc: TransactionStateError
    ) -> JSONResponse:
        logger.error("transaction.misuse", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"detail": str(exc)})
