"""
API routes for the temperature variance heat map.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from heatmap.engine.loader import DataUnavailable
from heatmap.engine.svg_writer import render_legend_svg, render_svg
from heatmap.engine.view import HeatMapView, NothingMounted
from heatmap.models.heatmap import VisualTree
from heatmap.models.tooltip import PointerEvent, TooltipState

router = APIRouter(prefix="/api/v1", tags=["heatmap"])

# Single display surface and tooltip for the service
view = HeatMapView()

SVG_MEDIA_TYPE = "image/svg+xml"


async def _render(refresh: bool) -> VisualTree:
    try:
        return await view.render(refresh=refresh)
    except DataUnavailable as e:
        raise HTTPException(status_code=502, detail=f"Heat map data unavailable: {e}")
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Heat map render error: {str(e)}")


@router.get("/heatmap", response_model=VisualTree)
async def get_heatmap(refresh: bool = False):
    """
    Fetch the variance dataset (once) and return the rendered visual tree.

    Pass refresh=true to re-fetch and redraw the surface.
    """
    return await _render(refresh)


@router.get("/heatmap.svg")
async def get_heatmap_svg(refresh: bool = False) -> Response:
    """Heat map surface as SVG markup."""
    tree = await _render(refresh)
    return Response(content=render_svg(tree), media_type=SVG_MEDIA_TYPE)


@router.get("/heatmap/legend.svg")
async def get_legend_svg() -> Response:
    """Legend strip as SVG markup."""
    tree = await _render(False)
    return Response(content=render_legend_svg(tree.legend), media_type=SVG_MEDIA_TYPE)


@router.get("/heatmap/tooltip", response_model=TooltipState)
async def get_tooltip():
    """Current tooltip state (text, position, fade-in opacity)."""
    return view.tooltip.snapshot()


@router.post("/heatmap/pointer", response_model=TooltipState)
async def post_pointer_event(body: PointerEvent):
    """Forward a pointer enter/leave over the plot to the tooltip."""
    try:
        return view.pointer_event(body)
    except NothingMounted as e:
        raise HTTPException(status_code=409, detail=str(e))
