from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Timestamped(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime
    updated_at: datetime


class IDModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
