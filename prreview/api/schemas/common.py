"""Shared error envelope schemas (documentation only; handlers build the body)."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    """``{"error": {"code": ..., "message": ...}}`` returned for every failure."""

    error: ErrorDetail
