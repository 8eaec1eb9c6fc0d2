"""
API-level tests for the heat map endpoints (/api/v1/heatmap*).

The dataset fetch is replaced with an in-memory fixture for every test.
"""

import pytest
from fastapi.testclient import TestClient

from heatmap.api import heatmap as heatmap_api
from heatmap.engine.loader import DataUnavailable, parse_dataset
from heatmap.engine.view import HeatMapView
from heatmap.main import app

client = TestClient(app)

SAMPLE_PAYLOAD = {
    "baseTemperature": 8.0,
    "monthlyVariance": [
        {"year": 2000 + i, "month": m, "variance": round(0.5 - 0.1 * ((i + m) % 7), 3)}
        for i in range(11)
        for m in range(1, 13)
    ],
}


@pytest.fixture
def fresh_view(monkeypatch):
    """Install a new view whose fetch returns the sample payload."""
    async def _fetch():
        return parse_dataset(SAMPLE_PAYLOAD)

    view = HeatMapView(fetch=_fetch)
    monkeypatch.setattr(heatmap_api, "view", view)
    return view


@pytest.fixture
def failing_view(monkeypatch):
    async def _fetch():
        raise DataUnavailable("HTTP 503 from upstream")

    view = HeatMapView(fetch=_fetch)
    monkeypatch.setattr(heatmap_api, "view", view)
    return view


class TestHealth:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestHeatMapEndpoint:
    def test_get_heatmap(self, fresh_view):
        resp = client.get("/api/v1/heatmap")
        assert resp.status_code == 200
        data = resp.json()

        assert len(data["cells"]) == len(SAMPLE_PAYLOAD["monthlyVariance"])
        assert data["base_temperature"] == 8.0
        assert len(data["x_axis"]["ticks"]) == 3
        assert len(data["y_axis"]["ticks"]) == 12
        assert len(data["legend"]["swatches"]) == 11

    def test_cell_structure(self, fresh_view):
        data = client.get("/api/v1/heatmap").json()
        cell = data["cells"][0]
        for key in ("x", "y", "width", "height", "fill", "year", "month",
                    "data_month", "variance", "temperature"):
            assert key in cell
        assert cell["year"] == 2000
        assert cell["month"] == 1
        assert cell["data_month"] == 0

    def test_color_domain(self, fresh_view):
        data = client.get("/api/v1/heatmap").json()
        variances = [r["variance"] for r in SAMPLE_PAYLOAD["monthlyVariance"]]
        assert data["color_domain"] == [min(variances), max(variances)]

    def test_mounted_once(self, fresh_view):
        client.get("/api/v1/heatmap")
        first_tree = fresh_view.surface.tree
        client.get("/api/v1/heatmap")
        assert fresh_view.surface.tree is first_tree

    def test_refresh_remounts(self, fresh_view):
        client.get("/api/v1/heatmap")
        first_tree = fresh_view.surface.tree
        client.get("/api/v1/heatmap?refresh=true")
        assert fresh_view.surface.tree is not first_tree

    def test_data_unavailable(self, failing_view):
        resp = client.get("/api/v1/heatmap")
        assert resp.status_code == 502
        assert "unavailable" in resp.json()["detail"]
        assert failing_view.surface.is_mounted is False


class TestSvgEndpoints:
    def test_heatmap_svg(self, fresh_view):
        resp = client.get("/api/v1/heatmap.svg")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert resp.text.count('class="cell"') == len(SAMPLE_PAYLOAD["monthlyVariance"])

    def test_legend_svg(self, fresh_view):
        resp = client.get("/api/v1/heatmap/legend.svg")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert "Min Value" in resp.text
        assert "Max Value" in resp.text

    def test_svg_data_unavailable(self, failing_view):
        resp = client.get("/api/v1/heatmap.svg")
        assert resp.status_code == 502


class TestPointerEndpoint:
    def test_pointer_before_render(self, fresh_view):
        resp = client.post("/api/v1/heatmap/pointer", json={"event": "enter", "x": 1, "y": 1})
        assert resp.status_code == 409

    def test_enter_and_leave(self, fresh_view):
        client.get("/api/v1/heatmap")
        resp = client.post(
            "/api/v1/heatmap/pointer",
            json={"event": "enter", "x": 5, "y": 5, "page_x": 100, "page_y": 200},
        )
        assert resp.status_code == 200
        state = resp.json()
        # first record: variance 0.4 over a base of 8.0
        assert state["state"] == "VISIBLE"
        assert state["text"] == "Year: 2000, Month: 1, Temp: 8.4"
        assert state["left"] == 120
        assert state["top"] == 220
        assert state["data_year"] == "2000"
        assert state["fade_in_ms"] == 500

        resp = client.get("/api/v1/heatmap/tooltip")
        assert resp.json()["state"] == "VISIBLE"

        resp = client.post("/api/v1/heatmap/pointer", json={"event": "leave"})
        state = resp.json()
        assert state["state"] == "HIDDEN"
        assert state["hidden"] is True
        assert state["opacity"] == 0.0

    def test_invalid_event(self, fresh_view):
        resp = client.post("/api/v1/heatmap/pointer", json={"event": "click"})
        assert resp.status_code == 422
