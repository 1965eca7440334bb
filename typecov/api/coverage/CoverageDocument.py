"""Output schema of the written coverage report."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Schema(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class StatsOutput(_Schema):
    """Known/total counts and the finalized percentage."""

    known_count: int = Field(..., ge=0, alias="knownCount", description="Positions with a known type")
    total_count: int = Field(..., ge=0, alias="totalCount", description="Positions scored")
    percentage: float = Field(..., ge=0, le=100, description="100 * known / total, 100 when nothing was scored")

    @model_validator(mode="after")
    def check_known_within_total(self) -> "StatsOutput":
        if self.known_count > self.total_count:
            raise ValueError(f"knownCount ({self.known_count}) exceeds totalCount ({self.total_count})")
        return self


class IncidentOutput(_Schema):
    """One unknown-type position."""

    name: str = Field(..., description="Identifier, parameter or function name, 'unknown' if unnamed")
    start: int = Field(..., ge=0, description="Offset of the node including leading trivia")
    end: int = Field(..., ge=0, description="Offset where the node ends")
    text: str = Field(..., description="Source text at the node")


class FileReportOutput(_Schema):
    """Coverage of one file for one breakdown."""

    filename: str
    stats: StatsOutput
    incidents: list[IncidentOutput]


class ReportOutput(_Schema):
    """Coverage of one breakdown across all files."""

    stats: StatsOutput
    files: list[FileReportOutput] = Field(..., description="Files with incidents, largest gap first")


class BreakdownsOutput(_Schema):
    identifiers: ReportOutput
    declarations: ReportOutput
    parameters: ReportOutput
    returns: ReportOutput


class CoverageDocument(_Schema):
    """Complete coverage report as written to disk.

    Output structure:
    - stats: overall identifier coverage
    - breakdowns: one report per breakdown (identifiers, declarations, parameters, returns)
    """

    stats: StatsOutput
    breakdowns: BreakdownsOutput
