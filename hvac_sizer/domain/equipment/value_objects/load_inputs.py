"""
LoadInputs Value Object

The building's design loads as submitted by the user (typically the output
of a Manual J calculation performed elsewhere).

Responsibility:
    - Validate field ranges and cross-field consistency at construction
    - Derive latent cooling load and sensible heat ratio (SHR)

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Uses Pydantic for validation: a LoadInputs instance that exists is
      already consistent, so the sizing engine never re-checks ranges
    - Derived values are properties, recomputed on access, never stored
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

# Plausible SHR window for residential cooling loads
MIN_SENSIBLE_HEAT_RATIO = 0.65
MAX_SENSIBLE_HEAT_RATIO = 1.0


class LoadInputs(BaseModel):
    """
    Immutable value object holding the design loads for one calculation.

    Attributes:
        total_heating_btu: Design heating load (BTU/hr, 0-500000)
        total_cooling_btu: Design total cooling load (BTU/hr, 0-500000)
        sensible_cooling_btu: Sensible part of the cooling load (BTU/hr)
        outdoor_summer_design_temp: Summer design temperature (°F)
        outdoor_winter_design_temp: Winter design temperature (°F)
        elevation: Site elevation in feet (drives furnace derating)
        indoor_humidity: Indoor design relative humidity (%)

    Derived:
        latent_cooling_btu = total_cooling_btu - sensible_cooling_btu
        sensible_heat_ratio = sensible_cooling_btu / total_cooling_btu
            (0 when there is no cooling load)

    Validation Rules:
        - sensible_cooling_btu <= total_cooling_btu
        - SHR within [0.65, 1.0] whenever total_cooling_btu > 0
        - At least one of total_heating_btu / total_cooling_btu > 0
        - Winter design temp below summer design temp when both are given

    Examples:
        >>> loads = LoadInputs(
        ...     total_heating_btu=60000,
        ...     total_cooling_btu=30000,
        ...     sensible_cooling_btu=24000,
        ... )
        >>> loads.latent_cooling_btu
        6000.0
        >>> loads.sensible_heat_ratio
        0.8
    """

    total_heating_btu: float = Field(..., ge=0, le=500000)
    total_cooling_btu: float = Field(..., ge=0, le=500000)
    sensible_cooling_btu: float = Field(..., ge=0, le=500000)
    outdoor_summer_design_temp: Optional[float] = Field(default=None, ge=-30, le=150)
    outdoor_winter_design_temp: Optional[float] = Field(default=None, ge=-30, le=150)
    elevation: Optional[float] = Field(
        default=None, ge=-3000, le=30000, description="Site elevation (ft)"
    )
    indoor_humidity: Optional[float] = Field(default=None, ge=0, le=100)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "total_heating_btu": 60000,
                    "total_cooling_btu": 30000,
                    "sensible_cooling_btu": 24000,
                    "outdoor_summer_design_temp": 95,
                    "outdoor_winter_design_temp": 10,
                    "elevation": 500,
                    "indoor_humidity": 50,
                }
            ]
        },
    }

    @model_validator(mode="after")
    def validate_load_consistency(self) -> "LoadInputs":
        """
        Enforce cross-field invariants.

        Raises:
            ValueError: If any invariant is violated (collected into
                pydantic's ValidationError by the caller)
        """
        if self.sensible_cooling_btu > self.total_cooling_btu:
            raise ValueError(
                f"Sensible cooling load ({self.sensible_cooling_btu:,.0f}) cannot "
                f"exceed total cooling load ({self.total_cooling_btu:,.0f})"
            )

        if self.total_cooling_btu > 0:
            shr = self.sensible_heat_ratio
            if not MIN_SENSIBLE_HEAT_RATIO <= shr <= MAX_SENSIBLE_HEAT_RATIO:
                raise ValueError(
                    f"Sensible heat ratio {shr:.2f} outside plausible range "
                    f"{MIN_SENSIBLE_HEAT_RATIO}-{MAX_SENSIBLE_HEAT_RATIO}"
                )

        if self.total_heating_btu <= 0 and self.total_cooling_btu <= 0:
            raise ValueError("At least one of heating or cooling load must be greater than 0")

        if (
            self.outdoor_winter_design_temp is not None
            and self.outdoor_summer_design_temp is not None
            and self.outdoor_winter_design_temp >= self.outdoor_summer_design_temp
        ):
            raise ValueError(
                f"Winter design temperature ({self.outdoor_winter_design_temp}°F) must be "
                f"below summer design temperature ({self.outdoor_summer_design_temp}°F)"
            )

        return self

    @property
    def latent_cooling_btu(self) -> float:
        """Latent cooling load (moisture removal), BTU/hr."""
        return self.total_cooling_btu - self.sensible_cooling_btu

    @property
    def sensible_heat_ratio(self) -> float:
        """Sensible / total cooling load; 0 when there is no cooling load."""
        if self.total_cooling_btu <= 0:
            return 0.0
        return self.sensible_cooling_btu / self.total_cooling_btu

    @property
    def has_heating_load(self) -> bool:
        return self.total_heating_btu > 0

    @property
    def has_cooling_load(self) -> bool:
        return self.total_cooling_btu > 0

    @property
    def site_elevation(self) -> float:
        """Elevation in feet, 0 when not supplied."""
        return self.elevation or 0.0
