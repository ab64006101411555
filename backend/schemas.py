"""Pydantic schemas for API request/response validation."""

import enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------- Choice sets ----------
class RoomShape(str, enum.Enum):
    RECTANGULAR = "rectangular"
    L_SHAPE = "L-shape"
    CUSTOM = "custom"


class CeilingType(str, enum.Enum):
    NORMAL = "normal"
    FALSE_CEILING = "false-ceiling"


class HumidityLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SunExposure(str, enum.Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class RoomType(str, enum.Enum):
    BEDROOM = "bedroom"
    OFFICE = "office"
    CLASSROOM = "classroom"
    SERVER_ROOM = "server-room"
    HALL = "hall"
    SHOP = "shop"


class UsagePattern(str, enum.Enum):
    CONTINUOUS = "continuous"
    INTERMITTENT = "intermittent"


class AcType(str, enum.Enum):
    SPLIT = "Split AC"
    CASSETTE = "Cassette"
    DUCTED = "Ducted"
    VRF = "VRF"


class _CamelModel(BaseModel):
    """Accepts both snake_case and camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Design request ----------
class DesignRequest(_CamelModel):
    """One validated form submission. Immutable."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        str_strip_whitespace=True,
    )

    # Room geometry
    room_length: float = Field(..., ge=0.01, description="Room length in meters")
    room_width: float = Field(..., ge=0.01, description="Room width in meters")
    room_height: float = Field(..., ge=0.01, description="Room height in meters")
    room_shape: RoomShape
    number_of_windows: int = Field(..., ge=0)
    window_size_and_orientation: str = Field(..., min_length=1)
    number_of_doors: int = Field(..., ge=0)
    ceiling_type: CeilingType

    # Environmental conditions
    location_city: str = Field(..., min_length=1)
    outdoor_design_temperature: float = Field(..., allow_inf_nan=False, description="°C")
    humidity_level: HumidityLevel
    sun_exposure: SunExposure

    # Room usage
    room_type: RoomType
    number_of_occupants: int = Field(..., ge=0)
    occupancy_duration: float = Field(..., ge=0, description="Hours per day")
    internal_heat_sources: str = Field(..., min_length=1)
    usage_pattern: UsagePattern

    @field_validator("ceiling_type", "room_type", mode="before")
    @classmethod
    def _hyphenate_spaced_choice(cls, value):
        # accept the spelled-out "false ceiling" / "server room" form values
        if isinstance(value, str):
            return "-".join(value.strip().lower().split())
        return value


# ---------- Estimator inputs ----------
class CoolingLoadInput(_CamelModel):
    room_length: float
    room_width: float
    room_height: float
    room_shape: RoomShape
    num_windows: int
    window_size_and_orientation: str
    num_doors: int
    ceiling_type: CeilingType
    location_city: str
    outdoor_design_temperature: float
    humidity_level: HumidityLevel
    sun_exposure: SunExposure
    room_type: RoomType
    num_occupants: int
    occupancy_duration: float
    internal_heat_sources: str
    usage_pattern: UsagePattern


class CapacityInput(_CamelModel):
    room_length: float
    room_width: float
    room_height: float
    room_shape: RoomShape
    number_of_windows: int
    window_size_and_orientation: str
    number_of_doors: int
    ceiling_type: CeilingType
    location_city: str
    outdoor_design_temperature: float
    humidity_level: HumidityLevel
    sun_exposure: SunExposure
    room_type: RoomType
    number_of_occupants: int
    occupancy_duration: float
    internal_heat_sources: str
    usage_pattern: UsagePattern


class PlacementInput(_CamelModel):
    room_length: float
    room_width: float
    room_height: float
    room_type: RoomType


class AirflowInput(_CamelModel):
    room_length: float
    room_width: float
    room_height: float
    room_type: RoomType
    number_of_occupants: int


class EfficiencyInput(_CamelModel):
    room_type: RoomType
    climate: str
    existing_insulation: Optional[str] = None
    window_shading: Optional[str] = None
    thermostat_settings: Optional[str] = None


# ---------- Estimator results ----------
class CoolingLoadResult(_CamelModel):
    cooling_load_estimate: str


class CapacityResult(_CamelModel):
    ac_capacity_tr: float = Field(..., gt=0)
    ac_capacity_kw: Optional[float] = None
    suggested_units: str
    ac_type: AcType


class PlacementResult(_CamelModel):
    recommended_position: str
    mounting_height: str
    reasoning: str


class AirflowResult(_CamelModel):
    airflow_direction: str
    coverage_strategy: str
    throw_length_consideration: str
    draft_avoidance: str


class EfficiencyResult(_CamelModel):
    energy_saving_tips: str


# ---------- Design summary ----------
class RoomOverview(BaseModel):
    room_size: str
    usage_type: str
    occupancy: str


class CoolingLoadAnalysis(BaseModel):
    estimated_cooling_load: str


class RecommendedAcSystem(BaseModel):
    ac_capacity: str
    ac_type: str
    number_of_units: str


class AcPlacement(BaseModel):
    recommended_position: str
    mounting_height: str
    reasoning: str


class AirflowDesign(BaseModel):
    airflow_direction: str
    coverage_strategy: str
    throw_length_consideration: str
    draft_avoidance: str


class EfficiencyRecommendations(BaseModel):
    energy_saving_tips: str


class DesignSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    room_overview: RoomOverview
    cooling_load_analysis: CoolingLoadAnalysis
    recommended_ac_system: RecommendedAcSystem
    ac_placement: AcPlacement
    airflow_design: AirflowDesign
    efficiency_recommendations: EfficiencyRecommendations


class FieldErrorOut(BaseModel):
    field: str
    message: str


class DesignValidationResponse(BaseModel):
    detail: str = "Invalid design parameters"
    errors: list[FieldErrorOut] = []


class DesignErrorResponse(BaseModel):
    error: str


# ---------- Chat ----------
class ChatMessage(BaseModel):
    role: Literal["user", "model", "assistant"] = Field(..., description="'user' or 'model'")
    content: str


class ChatRequest(BaseModel):
    history: list[ChatMessage] = Field(..., min_length=1)


class ChatResponse(BaseModel):
    content: str = ""
    error: Optional[str] = None
