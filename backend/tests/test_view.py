"""
Tests for the heat map view: fetch → render → mount, and pointer routing.
"""

import asyncio

import pytest

from heatmap.config import TooltipPhase
from heatmap.engine.loader import DataUnavailable
from heatmap.engine.tooltip import TooltipController
from heatmap.engine.view import HeatMapView, NothingMounted
from heatmap.models.dataset import Dataset
from heatmap.models.tooltip import PointerEvent


def _dataset(records=((2000, 3, 0.5), (2001, 3, -0.5)), base=8.0) -> Dataset:
    return Dataset(
        base_temperature=base,
        records=[{"year": y, "month": m, "variance": v} for y, m, v in records],
    )


class CountingFetch:
    def __init__(self, result=None, error=None):
        self.result = result if result is not None else _dataset()
        self.error = error
        self.calls = 0

    async def __call__(self) -> Dataset:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


class TestRender:
    def test_render_mounts_tree(self):
        fetch = CountingFetch()
        view = HeatMapView(fetch=fetch)
        tree = asyncio.run(view.render())
        assert len(tree.cells) == 2
        assert view.surface.tree is tree
        assert fetch.calls == 1

    def test_render_reuses_mounted_tree(self):
        fetch = CountingFetch()
        view = HeatMapView(fetch=fetch)
        first = asyncio.run(view.render())
        second = asyncio.run(view.render())
        assert first is second
        assert fetch.calls == 1

    def test_refresh_redraws(self):
        fetch = CountingFetch()
        view = HeatMapView(fetch=fetch)
        asyncio.run(view.render())
        fetch.result = _dataset(records=((1990, 1, 0.0),))
        tree = asyncio.run(view.render(refresh=True))
        assert fetch.calls == 2
        assert [c.year for c in tree.cells] == [1990]
        assert view.surface.tree is tree

    def test_concurrent_renders_fetch_once(self):
        fetch = CountingFetch()
        view = HeatMapView(fetch=fetch)

        async def _both():
            return await asyncio.gather(view.render(), view.render())

        a, b = asyncio.run(_both())
        assert a is b
        assert fetch.calls == 1

    def test_fetch_failure_leaves_surface_empty(self):
        view = HeatMapView(fetch=CountingFetch(error=DataUnavailable("offline")))
        with pytest.raises(DataUnavailable):
            asyncio.run(view.render())
        assert view.surface.is_mounted is False

    def test_empty_dataset_leaves_surface_empty(self):
        view = HeatMapView(fetch=CountingFetch(result=_dataset(records=())))
        with pytest.raises(DataUnavailable):
            asyncio.run(view.render())
        assert view.surface.is_mounted is False

    def test_failed_refresh_clears_previous_tree(self):
        fetch = CountingFetch()
        view = HeatMapView(fetch=fetch)
        asyncio.run(view.render())
        fetch.error = DataUnavailable("offline")
        with pytest.raises(DataUnavailable):
            asyncio.run(view.render(refresh=True))
        assert view.surface.is_mounted is False


class TestPointerEvents:
    def setup_method(self):
        self.now = 0.0
        self.view = HeatMapView(
            fetch=CountingFetch(),
            tooltip=TooltipController(clock=lambda: self.now),
        )

    def test_pointer_before_mount(self):
        with pytest.raises(NothingMounted):
            self.view.pointer_event(PointerEvent(event="enter", x=1, y=1))

    def test_hover_shows_tooltip_after_fade(self):
        asyncio.run(self.view.render())
        # years 2000/2001 split the 1400px plot; month 3 fills the height
        state = self.view.pointer_event(
            PointerEvent(event="enter", x=100, y=200, page_x=500, page_y=300)
        )
        assert state.state == TooltipPhase.VISIBLE
        assert state.text == "Year: 2000, Month: 3, Temp: 8.5"
        assert state.left == 520
        assert state.top == 320
        assert not self.view.tooltip.is_shown()

        self.now += 0.5
        assert self.view.tooltip.is_shown()

        state = self.view.pointer_event(PointerEvent(event="leave"))
        assert state.state == TooltipPhase.HIDDEN
        assert state.opacity == 0.0

    def test_hover_second_cell(self):
        asyncio.run(self.view.render())
        state = self.view.pointer_event(PointerEvent(event="enter", x=1000, y=10))
        assert state.text == "Year: 2001, Month: 3, Temp: 7.5"

    def test_enter_over_empty_space_hides(self):
        asyncio.run(self.view.render())
        self.view.pointer_event(PointerEvent(event="enter", x=100, y=200))
        state = self.view.pointer_event(PointerEvent(event="enter", x=5000, y=200))
        assert state.state == TooltipPhase.HIDDEN

    def test_refresh_resets_tooltip(self):
        asyncio.run(self.view.render())
        self.view.pointer_event(PointerEvent(event="enter", x=100, y=200))
        asyncio.run(self.view.render(refresh=True))
        assert self.view.tooltip.snapshot().state == TooltipPhase.HIDDEN
