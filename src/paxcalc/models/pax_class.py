"""Racing class and class group models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PaxClass(BaseModel):
    """A competition class and its PAX index."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    code: str
    name: str
    pax_index: float
    is_active: bool = True


class ClassGroup(BaseModel):
    """A named category of related classes, in display order."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    description: str = ""
    classes: tuple[PaxClass, ...] = ()
