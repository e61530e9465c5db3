from datetime import date

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ContributionDay(BaseModel):
    """Single calendar cell of the contribution graph."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: date
    count: int = Field(ge=0)
    level: int
    day_of_week: int = Field(alias="dayOfWeek", ge=0, le=6)
    week_of_year: int = Field(alias="weekOfYear", ge=1, le=53)
    contrib_level: str = Field(alias="contribLevel")


class ContributionGraph(BaseModel):
    """Contribution graph document emitted for one user."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    total_contributions: int = Field(alias="totalContributions", ge=0)
    years: list[int]
    days: list[ContributionDay]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True)
