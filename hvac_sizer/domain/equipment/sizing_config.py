"""
Sizing Configuration

Business rules for equipment sizing, plausibility checks and load checks.
Every band, threshold and engineering constant used by the sizing engine
lives here.

Business Context:
    Equipment is never sized to exactly 100% of the design load. Each
    category tolerates a different amount of oversizing:
    - Furnaces (100-140% optimal): oversizing costs little beyond cycling
    - Boilers (100-125% optimal): pickup allowance, beyond 150% short-cycles
    - Cooling equipment (90-110% optimal): oversizing hurts dehumidification,
      so the upper limit tightens for single-stage units on small loads
    - Heat pumps sized to heating (100-120% optimal)

Design Principles:
    - Configuration as code (not database)
    - Type-safe constants
    - Immutable config object injected into the engine
"""

from dataclasses import dataclass, field
from typing import Any, Final

from hvac_sizer.domain.equipment.entities.equipment import Staging


# ============================================================================
# ENGINEERING CONSTANTS
# ============================================================================

BTU_PER_TON: Final[float] = 12000.0
BTU_PER_KW: Final[float] = 3412.0

# Furnace elevation derating
DERATING_THRESHOLD_FT: Final[float] = 1000.0
DERATING_PERCENT_PER_1000_FT: Final[float] = 3.0


# ============================================================================
# SIZING BANDS - sizing percentage limits (inclusive)
# ============================================================================

# Furnace (heating load)
FURNACE_MIN_PERCENT: Final[int] = 100
FURNACE_OPTIMAL_MAX: Final[int] = 140
FURNACE_OVERSIZED_MAX: Final[int] = 200  # above this the unit is excluded

# Boiler (heating load)
BOILER_MIN_PERCENT: Final[int] = 100
BOILER_OPTIMAL_MAX: Final[int] = 125
BOILER_ACCEPTABLE_MAX: Final[int] = 150

# Cooling equipment (AC and heat pumps sized to cooling)
COOLING_MIN_PERCENT: Final[int] = 90
COOLING_OPTIMAL_MAX: Final[int] = 110
SINGLE_STAGE_SMALL_LOAD_MAX: Final[int] = 120
SINGLE_STAGE_LARGE_LOAD_MAX: Final[int] = 115
SINGLE_STAGE_SMALL_LOAD_BTU: Final[float] = 24000.0  # "small" cooling load limit
TWO_STAGE_MAX: Final[int] = 125
VARIABLE_SPEED_MAX: Final[int] = 130

# Heat pump sized to heating load
HEAT_PUMP_HEATING_MIN_PERCENT: Final[int] = 100
HEAT_PUMP_HEATING_OPTIMAL_MAX: Final[int] = 120
HEAT_PUMP_HEATING_ACCEPTABLE_MAX: Final[int] = 150

# Furnace/AC combo (both loads must reach 100%)
COMBO_MIN_PERCENT: Final[int] = 100
COMBO_HEATING_ACCEPTABLE_MAX: Final[int] = 140
COMBO_COOLING_ACCEPTABLE_MAX: Final[int] = 130
COMBO_HEATING_OPTIMAL_MAX: Final[int] = 125
COMBO_COOLING_OPTIMAL_MAX: Final[int] = 115
COMBO_CFM_PER_TON: Final[int] = 400


# ============================================================================
# AIRFLOW AND HEAT PUMP STRATEGY
# ============================================================================

# CFM per ton by sensible heat ratio
CFM_PER_TON_LOW_SHR: Final[int] = 350  # SHR < 0.85: slow air for dehumidification
CFM_PER_TON_NORMAL_SHR: Final[int] = 400  # 0.85 <= SHR <= 0.95
CFM_PER_TON_HIGH_SHR: Final[int] = 450  # SHR > 0.95: dry climate
LOW_SHR_THRESHOLD: Final[float] = 0.85
HIGH_SHR_THRESHOLD: Final[float] = 0.95

# Below this SHR the latent load matters (latent capacity notes, heat pump strategy)
LATENT_CONCERN_SHR: Final[float] = 0.95

# Heat pump sized to heating must turn down below this share of cooling load
TURN_DOWN_TARGET_PERCENT: Final[int] = 80


# ============================================================================
# SPECIFICATION PLAUSIBILITY BANDS
# ============================================================================

AFUE_RANGE: Final[tuple[float, float]] = (0.80, 0.98)
SEER_RANGE: Final[tuple[float, float]] = (13.0, 25.0)
HSPF_RANGE: Final[tuple[float, float]] = (8.0, 15.0)
FURNACE_MAX_OUTPUT_TO_INPUT: Final[float] = 1.10
AC_TONNAGE_TOLERANCE_BTU: Final[float] = 2000.0
HEAT_PUMP_MAX_HEATING_TO_COOLING: Final[float] = 1.5


# ============================================================================
# LOAD INPUT CHECKS
# ============================================================================

HIGH_HEATING_LOAD_BTU: Final[float] = 200000.0
HIGH_COOLING_LOAD_BTU: Final[float] = 100000.0
LOW_SHR_WARNING_THRESHOLD: Final[float] = 0.70
MAX_HEATING_COOLING_RATIO: Final[float] = 3.0


# ============================================================================
# CONFIG OBJECT
# ============================================================================


def _default_cooling_max_by_staging() -> dict[Staging, int]:
    return {
        Staging.TWO_STAGE: TWO_STAGE_MAX,
        Staging.VARIABLE_SPEED: VARIABLE_SPEED_MAX,
    }


@dataclass(frozen=True)
class SizingConfig:
    """
    Complete configuration for the sizing engine.

    Encapsulates all bands and constants in a single immutable object so
    tests and alternative rule sets can be injected into RecommendationEngine.

    Usage:
        config = SizingConfig.default()
        engine = RecommendationEngine(config)
    """

    # Furnace
    furnace_min_percent: int = FURNACE_MIN_PERCENT
    furnace_optimal_max: int = FURNACE_OPTIMAL_MAX
    furnace_oversized_max: int = FURNACE_OVERSIZED_MAX
    derating_threshold_ft: float = DERATING_THRESHOLD_FT
    derating_percent_per_1000_ft: float = DERATING_PERCENT_PER_1000_FT

    # Boiler
    boiler_min_percent: int = BOILER_MIN_PERCENT
    boiler_optimal_max: int = BOILER_OPTIMAL_MAX
    boiler_acceptable_max: int = BOILER_ACCEPTABLE_MAX

    # Cooling
    cooling_min_percent: int = COOLING_MIN_PERCENT
    cooling_optimal_max: int = COOLING_OPTIMAL_MAX
    single_stage_small_load_max: int = SINGLE_STAGE_SMALL_LOAD_MAX
    single_stage_large_load_max: int = SINGLE_STAGE_LARGE_LOAD_MAX
    single_stage_small_load_btu: float = SINGLE_STAGE_SMALL_LOAD_BTU
    cooling_max_by_staging: dict[Staging, int] = field(
        default_factory=_default_cooling_max_by_staging
    )

    # Heat pump (heating-sized)
    heat_pump_heating_min_percent: int = HEAT_PUMP_HEATING_MIN_PERCENT
    heat_pump_heating_optimal_max: int = HEAT_PUMP_HEATING_OPTIMAL_MAX
    heat_pump_heating_acceptable_max: int = HEAT_PUMP_HEATING_ACCEPTABLE_MAX
    latent_concern_shr: float = LATENT_CONCERN_SHR
    turn_down_target_percent: int = TURN_DOWN_TARGET_PERCENT

    # Combo
    combo_min_percent: int = COMBO_MIN_PERCENT
    combo_heating_acceptable_max: int = COMBO_HEATING_ACCEPTABLE_MAX
    combo_cooling_acceptable_max: int = COMBO_COOLING_ACCEPTABLE_MAX
    combo_heating_optimal_max: int = COMBO_HEATING_OPTIMAL_MAX
    combo_cooling_optimal_max: int = COMBO_COOLING_OPTIMAL_MAX
    combo_cfm_per_ton: int = COMBO_CFM_PER_TON

    # Airflow
    cfm_per_ton_low_shr: int = CFM_PER_TON_LOW_SHR
    cfm_per_ton_normal_shr: int = CFM_PER_TON_NORMAL_SHR
    cfm_per_ton_high_shr: int = CFM_PER_TON_HIGH_SHR
    low_shr_threshold: float = LOW_SHR_THRESHOLD
    high_shr_threshold: float = HIGH_SHR_THRESHOLD

    # Specification plausibility
    afue_range: tuple[float, float] = AFUE_RANGE
    seer_range: tuple[float, float] = SEER_RANGE
    hspf_range: tuple[float, float] = HSPF_RANGE
    furnace_max_output_to_input: float = FURNACE_MAX_OUTPUT_TO_INPUT
    ac_tonnage_tolerance_btu: float = AC_TONNAGE_TOLERANCE_BTU
    heat_pump_max_heating_to_cooling: float = HEAT_PUMP_MAX_HEATING_TO_COOLING

    # Load input checks
    high_heating_load_btu: float = HIGH_HEATING_LOAD_BTU
    high_cooling_load_btu: float = HIGH_COOLING_LOAD_BTU
    low_shr_warning_threshold: float = LOW_SHR_WARNING_THRESHOLD
    max_heating_cooling_ratio: float = MAX_HEATING_COOLING_RATIO

    # Unit conversions
    btu_per_ton: float = BTU_PER_TON
    btu_per_kw: float = BTU_PER_KW

    def __post_init__(self) -> None:
        """Validate that every band is ordered low -> high."""
        bands = {
            "furnace": (
                self.furnace_min_percent,
                self.furnace_optimal_max,
                self.furnace_oversized_max,
            ),
            "boiler": (
                self.boiler_min_percent,
                self.boiler_optimal_max,
                self.boiler_acceptable_max,
            ),
            "cooling": (
                self.cooling_min_percent,
                self.cooling_optimal_max,
                self.single_stage_large_load_max,
            ),
            "heat_pump_heating": (
                self.heat_pump_heating_min_percent,
                self.heat_pump_heating_optimal_max,
                self.heat_pump_heating_acceptable_max,
            ),
        }
        for name, (low, middle, high) in bands.items():
            if not low <= middle <= high:
                raise ValueError(
                    f"Sizing band '{name}' must be ordered, got {low} <= {middle} <= {high}"
                )
        if not self.low_shr_threshold <= self.high_shr_threshold:
            raise ValueError(
                f"SHR thresholds must be ordered, got low={self.low_shr_threshold}, "
                f"high={self.high_shr_threshold}"
            )
        ranges = {"afue": self.afue_range, "seer": self.seer_range, "hspf": self.hspf_range}
        for name, (low, high) in ranges.items():
            if low > high:
                raise ValueError(f"Range '{name}' must be ordered, got {low} > {high}")
        if self.max_heating_cooling_ratio < 1:
            raise ValueError(
                f"max_heating_cooling_ratio must be >= 1, got {self.max_heating_cooling_ratio}"
            )

    @classmethod
    def default(cls) -> "SizingConfig":
        """Get default configuration from module constants."""
        return cls()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "SizingConfig":
        """
        Create configuration with custom overrides for testing.

        Args:
            **overrides: Field values to replace

        Returns:
            SizingConfig with overrides applied (validated by __post_init__)

        Examples:
            >>> config = SizingConfig.for_testing(furnace_optimal_max=130)
            >>> config.furnace_optimal_max
            130
        """
        return cls(**overrides)

    def cooling_max_percent(self, staging: Staging, total_cooling_btu: float) -> int:
        """
        Upper limit of the acceptable cooling band for the given staging.

        Single-stage units cycle on/off and dehumidify poorly when oversized,
        so they get the tightest limit, tighter still above 2 tons of load.

        Examples:
            >>> config = SizingConfig.default()
            >>> config.cooling_max_percent(Staging.SINGLE_STAGE, 24000)
            120
            >>> config.cooling_max_percent(Staging.SINGLE_STAGE, 36000)
            115
            >>> config.cooling_max_percent(Staging.VARIABLE_SPEED, 36000)
            130
        """
        if staging == Staging.SINGLE_STAGE:
            if total_cooling_btu <= self.single_stage_small_load_btu:
                return self.single_stage_small_load_max
            return self.single_stage_large_load_max
        return self.cooling_max_by_staging[staging]

    def cfm_per_ton(self, sensible_heat_ratio: float) -> int:
        """
        Airflow per ton for the given SHR.

        Examples:
            >>> SizingConfig.default().cfm_per_ton(0.80)
            350
            >>> SizingConfig.default().cfm_per_ton(0.95)
            400
            >>> SizingConfig.default().cfm_per_ton(0.97)
            450
        """
        if sensible_heat_ratio < self.low_shr_threshold:
            return self.cfm_per_ton_low_shr
        if sensible_heat_ratio <= self.high_shr_threshold:
            return self.cfm_per_ton_normal_shr
        return self.cfm_per_ton_high_shr

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging."""
        data = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if name != "cooling_max_by_staging"
        }
        data["cooling_max_by_staging"] = {
            staging.value: limit for staging, limit in self.cooling_max_by_staging.items()
        }
        return data


# ============================================================================
# MODULE-LEVEL VALIDATION
# ============================================================================

assert (
    COOLING_MIN_PERCENT <= COOLING_OPTIMAL_MAX <= SINGLE_STAGE_LARGE_LOAD_MAX
), "Cooling sizing band must be ordered"

assert AFUE_RANGE[0] < AFUE_RANGE[1] <= 1.0, f"Invalid AFUE range {AFUE_RANGE}"

assert (
    LOW_SHR_THRESHOLD <= HIGH_SHR_THRESHOLD
), f"SHR thresholds out of order: {LOW_SHR_THRESHOLD} > {HIGH_SHR_THRESHOLD}"
