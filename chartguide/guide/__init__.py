from .crosshair import (
    CrosshairGuide,
    CrosshairParams,
    CrosshairRenderOp,
    default_crosshair_styles,
    render_crosshair,
)

__all__ = [
    "CrosshairGuide",
    "CrosshairParams",
    "CrosshairRenderOp",
    "default_crosshair_styles",
    "render_crosshair",
]
