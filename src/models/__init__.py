"""Pydantic models for query inputs and health responses."""

from src.models.schemas import (
    HealthResponse,
    NewProperty,
    NewUser,
    PropertySearchOptions,
)

__all__ = [
    "HealthResponse",
    "NewProperty",
    "NewUser",
    "PropertySearchOptions",
]
