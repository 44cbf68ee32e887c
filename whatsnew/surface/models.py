"""Visual attributes a host binds to the surface."""

from pydantic import BaseModel, Field


class Appearance(BaseModel):
    opacity: float = Field(ge=0.0, le=1.0)
    scale: float = Field(ge=0.0, le=1.0)

    model_config = {"frozen": True}


OPEN_APPEARANCE = Appearance(opacity=1.0, scale=1.0)
