# ABOUTME: Domain models for countries and validated medal table rows
# ABOUTME: Frozen Pydantic models shared by the registry, extractor, and display layers

from pydantic import BaseModel, ConfigDict, Field


class Country(BaseModel):
    """A country eligible to appear in the medal list, paired with its flag glyph."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Exact country name as it appears in the medal table")
    flag: str = Field(..., description="Flag emoji shown next to the name")


class MedalRecord(BaseModel):
    """One validated medal table row.

    ``country`` is the instance held by the registry, never a copy.
    """

    model_config = ConfigDict(frozen=True)

    country: Country
    gold: int = Field(..., ge=0)
    silver: int = Field(..., ge=0)
    bronze: int = Field(..., ge=0)
    total: int = Field(..., ge=0)

    @property
    def counts(self) -> tuple[int, int, int, int]:
        return (self.gold, self.silver, self.bronze, self.total)
