# -*- coding: utf-8 -*-
"""Log entries — Pydantic models and display lookup tables."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class BristolType(BaseModel):
    score: int
    label: str
    desc: str


BRISTOL_SCALE: List[BristolType] = [
    BristolType(score=1, label="Type 1", desc="Separate hard lumps, like nuts (hard to pass)"),
    BristolType(score=2, label="Type 2", desc="Sausage-shaped, but lumpy"),
    BristolType(score=3, label="Type 3", desc="Like a sausage but with cracks on surface"),
    BristolType(score=4, label="Type 4", desc="Like a sausage or snake, smooth and soft"),
    BristolType(score=5, label="Type 5", desc="Soft blobs with clear cut edges (passed easily)"),
    BristolType(score=6, label="Type 6", desc="Fluffy pieces with ragged edges, a mushy stool"),
    BristolType(score=7, label="Type 7", desc="Watery, no solid pieces, entirely liquid"),
]

COLORS: List[str] = ["Brown", "Green", "Yellow", "Black", "Red", "Pale/Clay"]
QUANTITIES: List[str] = ["Small", "Medium", "Large"]
URGENCIES: List[str] = ["Normal", "Urgent", "Emergency"]
SMELLS: List[str] = ["Normal", "Strong", "Foul"]


def parse_timestamp(value: str) -> Optional[datetime]:
    if not value:
        return None
    value = value.strip()
    # Handle trailing Z / z.
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


class _LogFields(BaseModel):
    timestamp: str
    bristol_score: int
    color: str
    quantity: Optional[str] = None
    urgency: Optional[str] = None
    pain_level: int = 0
    notes: str = ""
    has_blood: bool = False
    has_mucus: bool = False
    is_floating: bool = False
    smell: Optional[str] = None

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value: object) -> object:
        return "" if value is None else value


class LogEntryCreate(_LogFields):
    timestamp: str = Field(..., min_length=1, description="ISO8601 timestamp")
    bristol_score: int = Field(..., ge=1, le=7, description="Bristol Stool Scale, 1 (hard) to 7 (liquid)")
    color: str = Field(..., min_length=1, max_length=64)
    quantity: Optional[str] = Field(None, max_length=64, description="Small | Medium | Large")
    urgency: Optional[str] = Field(None, max_length=64, description="Normal | Urgent | Emergency")
    pain_level: int = Field(0, ge=0, le=10)
    notes: str = Field("", max_length=2000)
    is_floating: bool = Field(False, description="Floating/greasy, may indicate malabsorption")
    smell: Optional[str] = Field(None, max_length=64, description="Normal | Strong | Foul")

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        if parse_timestamp(value) is None:
            raise ValueError("timestamp must be an ISO8601 string")
        return value


class LogEntry(_LogFields):
    """A stored row. Not range-checked: the file may hold rows written by other tools."""

    id: int


class CreateLogResponse(BaseModel):
    success: bool = True
    id: int


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
