"""User preference model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from paxcalc.models.pax_index import IndexType


class ViewMode(str, Enum):
    """Calculator layouts."""

    DIRECT = "Direct"
    LIST = "List"


class UserPreferences(BaseModel):
    """Settings remembered between calculator sessions."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    index_type: IndexType = IndexType.SOLO
    view_mode: ViewMode = ViewMode.DIRECT
    input_class: str | None = None
    output_class: str | None = None
    last_time: str = ""
    auto_update: bool = True
    pinned_version: str | None = None
