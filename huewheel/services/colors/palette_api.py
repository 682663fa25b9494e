"""
Palette API Orchestrator

Wraps the pure palette pipeline for the HTTP layer: request IDs, timing,
structured logging, metrics and the optional strict validation mode.
"""

import time
from typing import Optional

from fastapi import HTTPException
from loguru import logger

from huewheel.config import config
from huewheel.schemas import ColorModel, PaletteResponse
from huewheel.utils.ids import generate_request_id
from huewheel.utils.metrics import get_metrics
from .conversions import rgb_to_hsl
from .errors import InvalidInputError
from .harmony import Color, generate_palette, resolve_scheme
from .hex_codec import encode_hex, is_valid_hex, parse_color


def handle_palette(
    base: str,
    scheme: Optional[str] = None,
    strict: Optional[bool] = None
) -> PaletteResponse:
    """
    Generate a palette for the /v1/palette endpoint.

    Args:
        base: Base color in format #RRGGBB or RRGGBB
        scheme: Scheme identifier, defaults to config.DEFAULT_SCHEME
        strict: Reject invalid input with 400 instead of falling back,
            defaults to config.STRICT_VALIDATION

    Returns:
        PaletteResponse with ordered colors

    Raises:
        HTTPException: 400 for rejected input in strict mode, 500 otherwise
    """
    request_id = generate_request_id()
    start_time = time.time()
    scheme = scheme if scheme is not None else config.DEFAULT_SCHEME
    strict = config.STRICT_VALIDATION if strict is None else strict

    log = logger.bind(request_id=request_id)
    log.bind(base=base, scheme=scheme, strict=strict).info(f"Palette request {request_id} started")

    metrics = get_metrics()
    metrics.record_request("palette")

    try:
        colors = generate_palette(base, scheme, strict=strict)

        base_fallback = not is_valid_hex(base)
        resolved = resolve_scheme(scheme)
        recognized = resolved is not None
        if base_fallback:
            metrics.record_fallback("invalid_hex")
        if not recognized:
            metrics.record_fallback("unknown_scheme")

        total_time = time.time() - start_time
        metrics.record_palette(resolved.value if recognized else None, total_time * 1000)

        log.bind(
            colors=len(colors),
            recognized=recognized,
            total_time_ms=round(total_time * 1000, 2)
        ).info(f"Palette request {request_id} completed")

        return PaletteResponse(
            base=base,
            scheme=scheme,
            recognized=recognized,
            colors=[ColorModel(**color.to_dict()) for color in colors],
            debug={
                "request_id": request_id,
                "timing_ms": {"total": round(total_time * 1000, 2)},
                "base_fallback": base_fallback
            }
        )

    except InvalidInputError as e:
        metrics.record_failure("invalid_input")
        log.bind(error=str(e)).warning(f"Palette request {request_id} rejected")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        error_time = time.time() - start_time
        metrics.record_failure("internal")
        log.bind(
            error=str(e),
            error_time_ms=round(error_time * 1000, 2)
        ).error(f"Palette request {request_id} failed")
        raise HTTPException(
            status_code=500,
            detail="Internal error during palette generation"
        )


def handle_convert(hex_color: str, strict: Optional[bool] = None) -> ColorModel:
    """
    Express a single hex color in hex, RGB and HSL for /v1/convert.

    The hex field is re-encoded from the parsed channels, so it is always
    lowercase with a leading "#". RGB is the parsed channels, not an HSL
    round trip.
    """
    strict = config.STRICT_VALIDATION if strict is None else strict
    metrics = get_metrics()
    metrics.record_request("convert")

    try:
        rgb = parse_color(hex_color, strict=strict)
    except InvalidInputError as e:
        metrics.record_failure("invalid_input")
        raise HTTPException(status_code=400, detail=str(e))

    if not is_valid_hex(hex_color):
        metrics.record_fallback("invalid_hex")

    color = Color(
        hex=encode_hex(rgb.r, rgb.g, rgb.b),
        rgb=rgb,
        hsl=rgb_to_hsl(rgb.r, rgb.g, rgb.b)
    )
    return ColorModel(**color.to_dict())
