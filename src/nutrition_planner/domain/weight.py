"""Domain models for body-weight history."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class WeightEntry(BaseModel):
    """Body weight observed on a calendar day."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    weight: float = Field(gt=0, description="Body weight in kilograms.")
