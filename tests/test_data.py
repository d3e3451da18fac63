"""Tests for the Mux Data resources.

WHY: Data endpoints are read-only but query-heavy; the bracket
serialization of timeframe/filters is what Mux actually parses, so it is
checked on the wire.
"""

from __future__ import annotations

import pytest

from mux_client import MissingParameterError


class TestVideoViews:
    def test_list_serializes_arrays_with_brackets(self, call, recorder):
        call(lambda m: m.data.video_views.list({
            "viewer_id": "viewer-1",
            "timeframe": ["7:days"],
            "filters": ["country:US", "browser:Chrome"],
        }))

        params = recorder.last.url.params
        assert recorder.last.url.path == "/data/v1/video-views"
        assert params["viewer_id"] == "viewer-1"
        assert params.get_list("timeframe[]") == ["7:days"]
        assert params.get_list("filters[]") == ["country:US", "browser:Chrome"]
        assert "filters" not in params

    def test_get(self, call, recorder):
        call(lambda m: m.data.video_views.get("view-1"))
        assert recorder.last.url.path == "/data/v1/video-views/view-1"

    def test_get_requires_id(self, call, recorder):
        with pytest.raises(MissingParameterError, match="A video view ID is required"):
            call(lambda m: m.data.video_views.get(""))
        assert recorder.requests == []


class TestMetrics:
    @pytest.mark.parametrize("kind", ["breakdown", "insights", "overall", "timeseries"])
    def test_metric_paths(self, call, recorder, kind):
        call(lambda m: getattr(m.data.metrics, kind)("video_startup_time", {"timeframe": ["24:hours"]}))

        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/data/v1/metrics/video_startup_time/{}".format(kind)
        assert recorder.last.url.params.get_list("timeframe[]") == ["24:hours"]

    @pytest.mark.parametrize("kind", ["breakdown", "insights", "overall", "timeseries"])
    def test_metric_id_required(self, call, recorder, kind):
        with pytest.raises(MissingParameterError, match="A metric ID is required for {} metrics".format(
            "insight" if kind == "insights" else kind
        )):
            call(lambda m: getattr(m.data.metrics, kind)(""))
        assert recorder.requests == []

    def test_comparison(self, call, recorder):
        call(lambda m: m.data.metrics.comparison({"dimension": "browser", "value": "Safari"}))
        assert recorder.last.url.path == "/data/v1/metrics/comparison"
        assert recorder.last.url.params["dimension"] == "browser"


class TestOtherData:
    def test_errors_list(self, call, recorder):
        call(lambda m: m.data.errors.list({"filters": ["operating_system:windows"]}))
        assert recorder.last.url.path == "/data/v1/errors"
        assert recorder.last.url.params.get_list("filters[]") == ["operating_system:windows"]

    def test_filters(self, call, recorder):
        call(lambda m: m.data.filters.list())
        assert recorder.last.url.path == "/data/v1/filters"

        call(lambda m: m.data.filters.get("browser", {"limit": 5}))
        assert recorder.last.url.path == "/data/v1/filters/browser"
        assert recorder.last.url.params["limit"] == "5"

    def test_filter_id_required(self, call, recorder):
        with pytest.raises(MissingParameterError, match="A filter ID is required"):
            call(lambda m: m.data.filters.get(None))
        assert recorder.requests == []

    def test_exports(self, call, recorder):
        recorder.queue(json={"data": ["https://s3.example.com/export.csv.gz"], "total_row_count": 1})

        result = call(lambda m: m.data.exports.list())

        assert recorder.last.url.path == "/data/v1/exports"
        assert result == ["https://s3.example.com/export.csv.gz"]
