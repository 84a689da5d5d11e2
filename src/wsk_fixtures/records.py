"""Pydantic models for the records exchanged with the platform."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorRecord(BaseModel):
    error: str


class CreateCatParams(BaseModel):
    """Input accepted by ``create-cat``. Unknown keys are passed through."""

    model_config = ConfigDict(extra="allow")

    name: Any = None


class FetchCatParams(BaseModel):
    """Input accepted by ``fetch-cat``. Unknown keys are passed through."""

    model_config = ConfigDict(extra="allow")

    id: Any = None


class CreatedCat(BaseModel):
    id: int = 1


class Cat(BaseModel):
    # ``Any`` so the caller's id comes back with its original type.
    id: Any
    name: str = "Tahoma"
    color: str = "Tabby"
