"""US federal holiday models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class Holiday(BaseModel):
    """A federal holiday and the weekday it is observed on."""

    model_config = {"frozen": True}

    name: str
    actual: date
    observed: date

    @property
    def shifted(self) -> bool:
        return self.actual != self.observed
