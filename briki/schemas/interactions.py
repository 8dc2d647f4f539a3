from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class InteractionCreate(BaseModel):
    """Body of POST /api/interactions.

    Every field is optional at the schema level; required fields are checked by
    the interaction service so the client gets a single descriptive message.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plan_id: int | None = None
    device_id: str | None = None
    interaction_type: str | None = None
    user_id: str | None = None
    # Any JSON value: object, array, string, number or boolean.
    metadata: Any = None


class InteractionRead(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    plan_id: int
    user_id: str | None
    device_id: str
    interaction_type: str
    timestamp: datetime | None
    metadata: Any
