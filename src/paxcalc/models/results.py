"""Calculation and validation result models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paxcalc.models.pax_class import PaxClass


class CalculationResult(BaseModel):
    """Outcome of converting one time between two classes."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    input_time: float
    input_class: PaxClass
    output_time: float
    output_class: PaxClass
    time_difference: float
    is_faster: bool
    calculated_at: datetime


class ValidationResult(BaseModel):
    """Errors and warnings found in a dataset. Errors make it invalid."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    class_count: int = 0
    group_count: int = 0
