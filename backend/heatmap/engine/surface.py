"""
Display surface: holds the one mounted visual tree.

Every mount clears the previous tree before holding the new one, so stale
cells never survive a redraw.
"""

import logging
from typing import Optional

from heatmap.engine.scales import BandScale
from heatmap.models.heatmap import Cell, VisualTree

logger = logging.getLogger(__name__)


class DisplaySurface:
    def __init__(self) -> None:
        self._tree: Optional[VisualTree] = None
        self._cells: dict[tuple[int, int], Cell] = {}
        self._year_scale: Optional[BandScale] = None
        self._month_scale: Optional[BandScale] = None

    @property
    def tree(self) -> Optional[VisualTree]:
        return self._tree

    @property
    def is_mounted(self) -> bool:
        return self._tree is not None

    def clear(self) -> None:
        self._tree = None
        self._cells = {}
        self._year_scale = None
        self._month_scale = None

    def mount(self, tree: VisualTree) -> None:
        """Replace whatever is mounted with `tree`."""
        self.clear()

        # Same domains and ranges the renderer placed the cells with
        years = sorted({cell.year for cell in tree.cells})
        months = sorted({cell.month for cell in tree.cells})

        self._tree = tree
        self._cells = {(cell.year, cell.month): cell for cell in tree.cells}
        self._year_scale = BandScale(years, 0.0, tree.plot_width)
        self._month_scale = BandScale(months, 0.0, tree.plot_height)
        logger.debug("Mounted heat map with %d cells", len(tree.cells))

    def hit_test(self, x: float, y: float) -> Optional[Cell]:
        """Cell under the plot-coordinate point (x, y), if any."""
        if self._tree is None:
            return None

        year = self._year_scale.invert(x)
        month = self._month_scale.invert(y)
        if year is None or month is None:
            return None
        return self._cells.get((year, month))
