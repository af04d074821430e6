"""Schemas for the core app."""

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

__all__ = [
    "BaseSchemaModel",
    "DependencyHealth",
    "LivenessResponse",
    "ReadinessResponse",
]
