"""
Pydantic models for the monthly temperature variance dataset.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class VarianceRecord(BaseModel):
    """One month's deviation from the base temperature."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12, description="Calendar month, 1 = January")
    variance: float = Field(..., description="°C deviation from the base temperature")


class Dataset(BaseModel):
    """Base temperature plus the ordered monthly variance records."""

    model_config = ConfigDict(frozen=True)

    base_temperature: float = Field(
        ...,
        validation_alias=AliasChoices("baseTemperature", "base_temperature"),
        description="Baseline temperature in °C",
    )
    records: tuple[VarianceRecord, ...] = Field(
        ...,
        validation_alias=AliasChoices("monthlyVariance", "records"),
    )

    def years(self) -> list[int]:
        """Distinct years, ascending."""
        return sorted({r.year for r in self.records})

    def months(self) -> list[int]:
        """Distinct months present in the data, ascending."""
        return sorted({r.month for r in self.records})

    def variance_extent(self) -> tuple[float, float]:
        variances = [r.variance for r in self.records]
        return min(variances), max(variances)
