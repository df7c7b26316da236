"""
Response models for OpenAPI specification and contract stability.

Every route declares a response model so the schema stays stable for
SDK generation.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =======================
# Health & Monitoring
# =======================

class HealthStatus(BaseModel):
    """Basic health status response."""
    status: str = Field(..., description="Health status: ok, warning, error")
    timestamp: datetime = Field(..., description="Check timestamp")
    process_id: str = Field(..., description="Process ID as string")


class MetricsResponse(BaseModel):
    """In-process metrics snapshot."""
    status: str = Field(..., description="Metrics collection status")
    timestamp: datetime = Field(..., description="Metrics timestamp")
    metrics: Dict[str, Any] = Field(..., description="Current metrics data")
    error: Optional[str] = Field(None, description="Error if metrics collection failed")


class ServiceInfo(BaseModel):
    """Root endpoint payload."""
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")
    docs: str = Field(..., description="Interactive documentation URL")
    openapi: str = Field(..., description="OpenAPI schema URL")


# =======================
# Flying Star Chart
# =======================

class MountainModel(BaseModel):
    """One of the 24 mountains."""
    key: str = Field(..., description="Mountain key, e.g. 'ty'")
    label: str = Field(..., description="Display label, e.g. 'Tý'")
    center: float = Field(..., description="Center bearing in degrees")
    start: float = Field(..., description="Sector start (inclusive)")
    end: float = Field(..., description="Sector end (exclusive), wraps past 360")
    octant: str = Field(..., description="Parent octant key")
    yuan: str = Field(..., description="Trigram line: thien, dia or nhan")
    yin_yang: str = Field(..., description="Polarity: am or duong")


class DirectionModel(BaseModel):
    """Classified compass reading."""
    mountain: MountainModel
    kind: str = Field(
        ..., description="chinh, kiem, tieu-khong-vong or dai-khong-vong"
    )
    delta: float = Field(..., description="Distance from the mountain center in degrees")


class PeriodModel(BaseModel):
    period: int = Field(..., ge=1, le=9, description="Period (Vận) 1-9")
    start_year: int
    end_year: int


class BoardSetModel(BaseModel):
    """Period, facing and sitting grids; rows north to south, columns west to east."""
    van: List[List[int]]
    huong: List[List[int]]
    son: List[List[int]]


class CoordModel(BaseModel):
    row: int
    col: int


class CellMetaModel(BaseModel):
    """Analysis of one outer palace."""
    key: str = Field(..., description="Octant key")
    label: str = Field(..., description="Octant display label")
    coord: CoordModel
    son: int
    huong: int
    van: int
    earth: int
    son_phase: str
    huong_phase: str
    son_element: Optional[str] = None
    huong_element: Optional[str] = None
    van_element: Optional[str] = None
    earth_element: Optional[str] = None
    relation: Optional[str] = Field(None, description="Relation of sitting to facing element")
    pairs: List[str] = Field(default_factory=list, description="At most one star-pair pattern")


class GateModel(BaseModel):
    """Thành Môn (gate) detection result."""
    position: str
    kind: str = Field(..., description="chinh or phu")
    palace: str
    note: str


class AlternateBoardModel(BaseModel):
    facing: DirectionModel
    sitting: DirectionModel
    boards: BoardSetModel
    cell_meta: List[CellMetaModel]


class ChartResponse(BaseModel):
    """Complete Flying Star chart."""
    period_info: PeriodModel
    facing_degrees: float = Field(..., description="Facing bearing normalized to [0, 360)")
    facing: DirectionModel
    sitting: DirectionModel
    non_void_type: str
    is_void: bool = Field(..., description="Facing falls on a void line")
    warning: Optional[str] = None
    boards: BoardSetModel
    earth_grid: List[List[int]]
    cell_meta: List[CellMetaModel]
    alt: Optional[AlternateBoardModel] = Field(
        None, description="Second chart on the neighbouring mountain (void facings only)"
    )
    gate: Optional[GateModel] = None


class AnnualStarResponse(BaseModel):
    """Annual star lookup."""
    year: int
    direction: str
    period: int
    annual_star: int
    direction_advice: str
    star_meaning: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "year": 2024,
                "direction": "nam",
                "period": 9,
                "annual_star": 5,
                "direction_advice": "Hướng Nam hỏa vượng – hợp danh tiếng, công nghệ, tránh nóng nảy.",
                "star_meaning": "Ngũ Hoàng Liêm Trinh: đại sát; tránh động thổ, cần hóa giải.",
            }
        }
    )


class ReferenceResponse(BaseModel):
    """Static reference tables."""
    mountains: List[MountainModel]
    octants: Dict[str, str] = Field(..., description="Octant key -> display label")
    stars: Dict[str, str] = Field(..., description="Star number -> name")
    phases: Dict[str, str]
    elements: Dict[str, str]
    direction_kinds: Dict[str, str]


# RFC 7807 Problem Details (global error model)
class Problem(BaseModel):
    """Problem Details per RFC 7807 for error responses."""
    type: Optional[str] = Field(
        None, description="URI reference that identifies the problem type"
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(
        None, description="URI reference that identifies the specific occurrence"
    )
    code: Optional[str] = Field(None, description="Application-specific error code")
