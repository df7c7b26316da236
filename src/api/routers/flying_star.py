#!/usr/bin/env python3
"""
Flying Star API Router
Endpoints for Xuan Kong charts, annual star lookups and reference tables
"""

import time

from typing import Literal

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from api.models.responses import AnnualStarResponse, ChartResponse, ReferenceResponse
from api.services.metrics import chart_metrics
from app.core.config import MAX_YEAR, MIN_YEAR
from app.core.logging import get_api_logger
from app.openapi.common import DEFAULT_ERROR_RESPONSES
from constants.mountains import MOUNTAINS
from constants.palaces import OCTANT_LABELS, OCTANT_RING
from constants.stars import DIRECTION_KIND_LABELS, ELEMENT_LABELS, PHASE_LABELS, STAR_NAMES
from xuankong.facade import build_boards, calculate_flying_star
from xuankong.monitoring import record_timing

logger = get_api_logger("flying_star")

router = APIRouter(prefix="/api/v1/flying-star", tags=["flying-star"], responses=DEFAULT_ERROR_RESPONSES)

OctantKey = Literal["bac", "dong-bac", "dong", "dong-nam", "nam", "tay-nam", "tay", "tay-bac"]


class ChartRequest(BaseModel):
    """Request for a Flying Star chart"""

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Construction year")
    facing_degrees: float = Field(
        ...,
        allow_inf_nan=False,
        description="Facing bearing in degrees; any value, normalized modulo 360",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "year": 2024,
                "facing_degrees": 180.0,
            }
        }
    )


@router.post(
    "/chart",
    response_model=ChartResponse,
    summary="Build Flying Star chart",
    operation_id="flying_star_chart",
)
async def build_chart(request: ChartRequest) -> ChartResponse:
    """
    Build the Period, Facing and Sitting grids for a building.

    A facing on a void line also returns an alternate chart on the
    neighbouring mountain; a Thành Môn gate is reported when one exists.
    """
    start = time.perf_counter()
    result = build_boards(request.year, request.facing_degrees)
    elapsed = time.perf_counter() - start
    chart_metrics.record_chart(result, elapsed)
    record_timing("api.flying_star_chart", elapsed)

    logger.info(
        "Chart built: year=%d facing=%s (%s)",
        request.year,
        result.facing.mountain.key,
        result.facing.kind.value,
    )
    return ChartResponse.model_validate(result.to_dict())


@router.get(
    "/annual",
    response_model=AnnualStarResponse,
    summary="Annual star lookup",
    operation_id="flying_star_annual",
)
async def annual_star(
    year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR, description="Calendar year"),
    direction: OctantKey = Query(..., description="Octant key"),
) -> AnnualStarResponse:
    """Period, annual star and static advice for one of the 8 directions."""
    result = calculate_flying_star(year, direction)
    chart_metrics.record_annual_lookup(direction)
    return AnnualStarResponse(year=year, direction=direction, **result.to_dict())


@router.get(
    "/reference",
    response_model=ReferenceResponse,
    summary="Reference tables",
    operation_id="flying_star_reference",
)
async def reference() -> ReferenceResponse:
    """The 24 mountains and the display vocabularies."""
    return ReferenceResponse(
        mountains=[m.to_dict() for m in MOUNTAINS],
        octants={o.value: OCTANT_LABELS[o.value] for o in OCTANT_RING},
        stars={str(n): name for n, name in STAR_NAMES.items()},
        phases={p.value: label for p, label in PHASE_LABELS.items()},
        elements={e.value: label for e, label in ELEMENT_LABELS.items()},
        direction_kinds={k.value: label for k, label in DIRECTION_KIND_LABELS.items()},
    )
