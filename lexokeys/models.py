from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .charset import ALPHANUMERIC


# === Generator settings ===


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    characters: str = Field(default=ALPHANUMERIC, min_length=2)
    initial: Optional[str] = Field(default=None, description="Defaults to the midpoint character repeated 6 times")

    @model_validator(mode="after")
    def check_initial(self) -> "GeneratorConfig":
        if self.initial:
            foreign = sorted(set(self.initial) - set(self.characters))
            if foreign:
                raise ValueError(f"initial key uses characters outside the set: {''.join(foreign)!r}")
        return self


# === Bucket settings ===


class BucketConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field(default="|", min_length=1, max_length=1)
    default_tag: str = Field(default="0", min_length=1)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
