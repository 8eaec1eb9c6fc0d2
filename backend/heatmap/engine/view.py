"""
Heat map view: one display surface and one tooltip, fed by one dataset fetch.

render() runs fetch → render_heatmap → mount. A mounted tree is reused until a
refresh is asked for, and renders are serialized so two requests never mount
over each other.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from heatmap.engine import loader
from heatmap.engine.loader import DataUnavailable
from heatmap.engine.renderer import render_heatmap
from heatmap.engine.surface import DisplaySurface
from heatmap.engine.tooltip import TooltipController
from heatmap.models.dataset import Dataset
from heatmap.models.heatmap import VisualTree
from heatmap.models.tooltip import PointerEvent, PointerEventType, TooltipState

logger = logging.getLogger(__name__)


class NothingMounted(RuntimeError):
    """A pointer event arrived before any heat map was mounted."""


class HeatMapView:
    def __init__(
        self,
        fetch: Optional[Callable[[], Awaitable[Dataset]]] = None,
        surface: Optional[DisplaySurface] = None,
        tooltip: Optional[TooltipController] = None,
    ) -> None:
        self._fetch = fetch
        self.surface = surface or DisplaySurface()
        self.tooltip = tooltip or TooltipController()
        self._lock = asyncio.Lock()

    async def _load(self) -> Dataset:
        if self._fetch is not None:
            return await self._fetch()
        return await loader.fetch_dataset()

    async def render(self, refresh: bool = False) -> VisualTree:
        """
        Return the mounted tree, fetching and rendering it first if needed.

        On DataUnavailable the surface is left empty and the error propagates.
        """
        async with self._lock:
            if self.surface.is_mounted and not refresh:
                return self.surface.tree

            self.surface.clear()
            self.tooltip.pointer_leave()
            try:
                dataset = await self._load()
                tree = render_heatmap(dataset)
            except DataUnavailable as exc:
                logger.warning("Heat map not rendered: %s", exc)
                raise

            self.surface.mount(tree)
            logger.info(
                "Rendered heat map: %d cells, %d years, variance %.3f..%.3f",
                len(tree.cells), len(dataset.years()), *tree.color_domain,
            )
            return tree

    def pointer_event(self, event: PointerEvent) -> TooltipState:
        if not self.surface.is_mounted:
            raise NothingMounted("No heat map is mounted")

        if event.event == PointerEventType.LEAVE:
            return self.tooltip.pointer_leave()

        cell = self.surface.hit_test(event.x, event.y)
        if cell is None:
            return self.tooltip.pointer_leave()
        return self.tooltip.pointer_enter(cell, event.page_x, event.page_y)
