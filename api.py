"""
Money Amount Translator — FastAPI Server
=========================================

RESTful API for turning decimal amounts into English words.

Endpoints:
    POST /translate           Translate one amount (JSON body)
    GET  /translate/{amount}  Translate one amount (path parameter)
    POST /translate/batch     Translate many amounts, failures reported per item
    GET  /health              Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from amount_translator import __version__
from amount_translator.config import get_settings, load_environment
from amount_translator.exceptions import AmountTranslationError
from amount_translator.groups import SCALE_WORDS
from amount_translator.models import AmountTranslation
from amount_translator.translator import parse_amount, translate

logger = logging.getLogger(__name__)

load_environment()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Money Amount Translator API",
    description=(
        "Converts signed, arbitrary-precision decimal amounts into canonical "
        "English words for invoices, cheques and screen readers."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class TranslateRequest(BaseModel):
    """Request body for the /translate endpoint."""

    amount: str = Field(
        ...,
        min_length=1,
        description="A plain decimal literal, e.g. '921.015' or '-0.005'.",
        json_schema_extra={"example": "921.015"},
    )


class TranslateResponse(BaseModel):
    """Words for one amount plus the parts they were built from."""

    amount: str
    words: str
    is_negative: bool
    magnitude: str = Field(description="Integer dollar part (string: unbounded size)")
    cents: int

    model_config = {"json_schema_extra": {"example": {
        "amount": "921.015",
        "words": "Nine Hundred Twenty-One Dollars And Two Cents",
        "is_negative": False,
        "magnitude": "921",
        "cents": 2,
    }}}


class BatchRequest(BaseModel):
    """Request body for the /translate/batch endpoint."""

    amounts: list[str] = Field(..., min_length=1)


class ErrorOut(BaseModel):
    code: str
    message: str


class BatchItem(BaseModel):
    amount: str
    words: Optional[str] = None
    error: Optional[ErrorOut] = None


class BatchResponse(BaseModel):
    results: list[BatchItem]
    error_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    max_scale_word: str


# ─── Error Handling ──────────────────────────────────────────────────


@app.exception_handler(AmountTranslationError)
async def translation_error_handler(
    request: Request, exc: AmountTranslationError
) -> JSONResponse:
    """Report translation failures as 422 with a machine-readable code."""
    logger.info("Rejected %s: %s", request.url.path, exc.code)
    return JSONResponse(
        status_code=422,
        content={"detail": {"code": exc.code, "message": exc.message, "details": exc.details}},
    )


# ─── Helpers ─────────────────────────────────────────────────────────


def _build_response(raw: str, result: AmountTranslation) -> TranslateResponse:
    """Convert the internal AmountTranslation to the API response schema."""
    return TranslateResponse(
        amount=raw.strip(),
        words=result.words,
        is_negative=result.normalized.is_negative,
        magnitude=str(result.normalized.magnitude),
        cents=result.normalized.cents,
    )


def _translate_raw(raw: str) -> TranslateResponse:
    return _build_response(raw, translate(parse_amount(raw)))


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/translate",
    summary="Translate an amount from a JSON body",
    tags=["Translation"],
    responses={422: {"description": "Invalid amount or unsupported magnitude"}},
)
def translate_amount(request: TranslateRequest) -> TranslateResponse:
    """Return the canonical English words for a decimal amount.

    - **words**: e.g. "One Dollar And Two Cents"
    - **magnitude** / **cents**: the integer part and the rounded cents used
    """
    return _translate_raw(request.amount)


@app.get(
    "/translate/{amount}",
    summary="Translate an amount from the URL path",
    tags=["Translation"],
    responses={422: {"description": "Invalid amount or unsupported magnitude"}},
)
def translate_amount_path(amount: str) -> TranslateResponse:
    """Same as POST /translate, convenient for quick lookups."""
    return _translate_raw(amount)


@app.post(
    "/translate/batch",
    summary="Translate many amounts at once",
    tags=["Translation"],
    responses={413: {"description": "Too many amounts in one request"}},
)
def translate_batch(request: BatchRequest) -> BatchResponse:
    """Translate every amount; a bad amount fails only its own item."""
    settings = get_settings()
    if len(request.amounts) > settings.max_batch:
        raise HTTPException(
            status_code=413,
            detail=f"Too many amounts (max {settings.max_batch})",
        )

    results: list[BatchItem] = []
    for raw in request.amounts:
        try:
            words = _translate_raw(raw).words
        except AmountTranslationError as exc:
            results.append(
                BatchItem(amount=raw, error=ErrorOut(code=exc.code, message=exc.message))
            )
            continue
        results.append(BatchItem(amount=raw, words=words))

    error_count = sum(1 for item in results if item.error is not None)
    return BatchResponse(results=results, error_count=error_count)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        max_scale_word=SCALE_WORDS[-1],
    )
