"""
HueWheel API Schemas
Pydantic models for palette and conversion request/response validation.
"""
from typing import List, Dict
from pydantic import BaseModel, Field


class RGBModel(BaseModel):
    """RGB channel triple."""
    r: int = Field(..., description="Red channel (0-255)")
    g: int = Field(..., description="Green channel (0-255)")
    b: int = Field(..., description="Blue channel (0-255)")


class HSLModel(BaseModel):
    """HSL triple."""
    h: int = Field(..., description="Hue in degrees")
    s: int = Field(..., description="Saturation in percent (0-100)")
    l: int = Field(..., description="Lightness in percent (0-100)")


class ColorModel(BaseModel):
    """A color expressed in all three representations."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9a-f]{6}$",
        description="Lowercase hex color code in format #rrggbb"
    )
    rgb: RGBModel = Field(..., description="RGB representation")
    hsl: HSLModel = Field(..., description="HSL representation")


class PaletteDebug(BaseModel):
    """Request tracing information."""
    request_id: str = Field(..., description="Unique request identifier")
    timing_ms: Dict[str, float] = Field(..., description="Stage timings in milliseconds")
    base_fallback: bool = Field(
        False,
        description="Whether the base color failed to parse and black was used"
    )


class PaletteResponse(BaseModel):
    """Palette generation response."""
    base: str = Field(..., description="Base color as supplied by the caller")
    scheme: str = Field(..., description="Scheme identifier as supplied by the caller")
    recognized: bool = Field(
        ...,
        description="False when the scheme was unknown and only the base color was returned"
    )
    colors: List[ColorModel] = Field(..., description="Ordered palette entries")
    debug: PaletteDebug = Field(..., description="Debug information")


class SchemesResponse(BaseModel):
    """Supported schemes listing."""
    schemes: List[str] = Field(..., description="Scheme identifiers in listing order")
    default: str = Field(..., description="Scheme used when none is requested")


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("huewheel-palette", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
