"""
HueWheel v1 API Routes
Implements /v1/palette, /v1/convert and supporting routes.
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, HTTPException, Query

from huewheel.config import config
from huewheel.schemas import ColorModel, ErrorResponse, PaletteResponse, SchemesResponse
from huewheel.services.colors.harmony import list_schemes
from huewheel.services.colors.palette_api import handle_convert, handle_palette
from huewheel.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Palettes"])


@router.get("/palette",
            response_model=PaletteResponse,
            responses={400: {"model": ErrorResponse}},
            summary="Generate Palette",
            description="Derive a harmony palette from a base color")
def get_palette(
    base: str = Query(..., description="Base color, #RRGGBB or RRGGBB"),
    scheme: Optional[str] = Query(None, description="Harmony scheme identifier"),
    strict: Optional[bool] = Query(None, description="Reject invalid input instead of falling back")
) -> PaletteResponse:
    """
    Generate a palette.

    Unknown schemes return the base color alone and invalid colors are
    treated as black, unless strict validation is on.
    """
    return handle_palette(base=base, scheme=scheme, strict=strict)


@router.get("/convert",
            response_model=ColorModel,
            responses={400: {"model": ErrorResponse}},
            summary="Convert Color",
            description="Express a hex color as hex, RGB and HSL")
def convert_color(
    hex_color: str = Query(..., alias="hex", description="Color, #RRGGBB or RRGGBB"),
    strict: Optional[bool] = Query(None, description="Reject invalid input instead of falling back")
) -> ColorModel:
    return handle_convert(hex_color, strict=strict)


@router.get("/schemes", response_model=SchemesResponse, summary="List Schemes")
def get_schemes() -> SchemesResponse:
    return SchemesResponse(schemes=list_schemes(), default=config.DEFAULT_SCHEME)


@router.get("/metrics", summary="Service Metrics")
def get_service_metrics() -> Dict[str, Any]:
    """In-process counters and timing statistics."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    return get_metrics().get_summary()
