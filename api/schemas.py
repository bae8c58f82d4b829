"""
schemas.py — FastAPI request/response models.
Kept apart from contracts.py so the API can evolve on its own.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import ExpressionIssue


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(..., min_length=1)


class EvaluateResponse(BaseModel):
    expression: str
    value: Optional[float]  # None for inf/nan — JSON has no such numbers
    display: str            # "23.0", "Infinity", "-Infinity", "NaN"
    is_finite: bool
    steps: list[str] = Field(default_factory=list)


# ─────────────────────────── /validate ───────────────────────────

class ValidateRequest(BaseModel):
    expression: str


class ValidateResponse(BaseModel):
    expression: str
    valid: bool
    tokens: list[str]
    issues: list[ExpressionIssue]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
