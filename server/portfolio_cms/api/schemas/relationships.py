from __future__ import annotations
"""
server/portfolio_cms/api/schemas/relationships.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Entrées de mutation des champs relation.

- relation "un"       : {"connect": "<id>"} ou {"disconnect": true}
- relation "plusieurs": {"connect": [...], "disconnect": [...]} ou {"set": [...]}
"""
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class RelateToOne(BaseModel):
    model_config = ConfigDict(extra="forbid")

    connect: Optional[uuid.UUID] = None
    disconnect: bool = False

    @model_validator(mode="after")
    def exactly_one_action(self) -> "RelateToOne":
        if (self.connect is None) == (not self.disconnect):
            raise ValueError("use either 'connect' or 'disconnect'")
        return self


class RelateToMany(BaseModel):
    model_config = ConfigDict(extra="forbid")

    connect: list[uuid.UUID] = []
    disconnect: list[uuid.UUID] = []
    set: Optional[list[uuid.UUID]] = None

    @model_validator(mode="after")
    def set_is_exclusive(self) -> "RelateToMany":
        if self.set is not None and (self.connect or self.disconnect):
            raise ValueError("'set' cannot be combined with 'connect' or 'disconnect'")
        return self
