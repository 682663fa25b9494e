"""
API integration tests for the palette endpoints.

Tests the /v1 routes end to end through the FastAPI test client:
- Palette generation per scheme with default and unknown schemes
- Silent fallback versus strict validation
- Conversion, scheme listing and metrics
"""

import pytest

from huewheel.config import Config
from huewheel.utils import metrics as metrics_module
from huewheel.utils.metrics import MetricsCollector


class TestPaletteEndpoint:
    """Test the /v1/palette endpoint"""

    def test_triadic_palette(self, test_client):
        response = test_client.get("/v1/palette", params={"base": "#3366cc", "scheme": "triadic"})

        assert response.status_code == 200
        data = response.json()

        assert data["base"] == "#3366cc"
        assert data["scheme"] == "triadic"
        assert data["recognized"] is True
        assert [c["hsl"]["h"] for c in data["colors"]] == [220, 340, 100]
        assert data["colors"][0] == {
            "hex": "#3366cc",
            "rgb": {"r": 51, "g": 102, "b": 204},
            "hsl": {"h": 220, "s": 60, "l": 50},
        }
        assert data["debug"]["request_id"].startswith("pal-")
        assert data["debug"]["base_fallback"] is False

    def test_default_scheme(self, test_client, monkeypatch):
        monkeypatch.setattr(Config, "DEFAULT_SCHEME", "complementary")

        response = test_client.get("/v1/palette", params={"base": "ff0000"})

        assert response.status_code == 200
        data = response.json()
        assert data["scheme"] == "complementary"
        assert [c["hex"] for c in data["colors"]] == ["#ff0000", "#00ffff"]

    def test_unknown_scheme_returns_base_only(self, test_client):
        response = test_client.get("/v1/palette", params={"base": "#3366cc", "scheme": "pastel"})

        assert response.status_code == 200
        data = response.json()
        assert data["recognized"] is False
        assert len(data["colors"]) == 1
        assert data["colors"][0]["hex"] == "#3366cc"

    def test_invalid_base_falls_back_to_black(self, test_client):
        response = test_client.get("/v1/palette", params={"base": "oops", "scheme": "tetradic"})

        assert response.status_code == 200
        data = response.json()
        assert data["debug"]["base_fallback"] is True
        assert {c["hex"] for c in data["colors"]} == {"#000000"}

    @pytest.mark.parametrize("params", [
        {"base": "oops", "scheme": "triadic", "strict": "true"},
        {"base": "#3366cc", "scheme": "pastel", "strict": "true"},
    ])
    def test_strict_mode_rejects_invalid_input(self, test_client, params):
        response = test_client.get("/v1/palette", params=params)

        assert response.status_code == 400
        assert "Invalid" in response.json()["detail"]

    def test_strict_mode_from_config(self, test_client, monkeypatch):
        monkeypatch.setattr(Config, "STRICT_VALIDATION", True)

        response = test_client.get("/v1/palette", params={"base": "#36c", "scheme": "triadic"})

        assert response.status_code == 400

    def test_missing_base(self, test_client):
        response = test_client.get("/v1/palette", params={"scheme": "triadic"})

        assert response.status_code == 422


class TestConvertEndpoint:
    """Test the /v1/convert endpoint"""

    def test_convert(self, test_client):
        response = test_client.get("/v1/convert", params={"hex": "FF8000"})

        assert response.status_code == 200
        assert response.json() == {
            "hex": "#ff8000",
            "rgb": {"r": 255, "g": 128, "b": 0},
            "hsl": {"h": 30, "s": 100, "l": 50},
        }

    def test_convert_invalid_non_strict(self, test_client):
        response = test_client.get("/v1/convert", params={"hex": "#12"})

        assert response.status_code == 200
        assert response.json()["hex"] == "#000000"

    def test_convert_invalid_strict(self, test_client):
        response = test_client.get("/v1/convert", params={"hex": "#12", "strict": "true"})

        assert response.status_code == 400


class TestServiceEndpoints:
    """Test schemes, metrics and health routes"""

    def test_schemes(self, test_client):
        response = test_client.get("/v1/schemes")

        assert response.status_code == 200
        data = response.json()
        assert len(data["schemes"]) == 6
        assert "split-complementary" in data["schemes"]

    def test_metrics_count_requests(self, test_client):
        test_client.get("/v1/palette", params={"base": "#3366cc", "scheme": "triadic"})
        test_client.get("/v1/palette", params={"base": "#3366cc", "scheme": "pastel"})

        response = test_client.get("/v1/metrics")

        assert response.status_code == 200
        counters = response.json()["counters"]
        assert counters["palette_requests_total"] == 2
        assert counters["palette_scheme_total_triadic"] == 1
        assert counters["palette_fallback_total_unknown_scheme"] == 1

    def test_metrics_window_bounded_across_requests(self, test_client, monkeypatch):
        collector = MetricsCollector(window=5)
        monkeypatch.setattr(metrics_module, "_metrics", collector)

        for _ in range(20):
            test_client.get("/v1/palette", params={"base": "#3366cc", "scheme": "triadic"})

        data = test_client.get("/v1/metrics").json()
        assert collector.window_size("triadic") == 5
        assert data["window"] == 5
        assert data["counters"]["palette_requests_total"] == 20
        assert data["scheme_latency_ms"]["triadic"]["count"] == 5

    def test_metrics_disabled(self, test_client, monkeypatch):
        monkeypatch.setattr(Config, "METRICS_ENABLED", False)

        response = test_client.get("/v1/metrics")

        assert response.status_code == 404

    def test_error_model_documented(self, test_client):
        paths = test_client.get("/openapi.json").json()["paths"]

        for path in ("/v1/palette", "/v1/convert"):
            schema = paths[path]["get"]["responses"]["400"]["content"]["application/json"]["schema"]
            assert schema["$ref"].endswith("/ErrorResponse")

    def test_health_check(self, test_client):
        response = test_client.get("/healthz")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["service"] == "huewheel-palette"
        assert "version" in data
