"""Tests for the FastAPI tool and infrastructure endpoints.

The client fixture swaps in an in-memory blob store, a clock frozen at
2025-12-09 18:02:15 UTC and settings pinned to UTC rendering.
"""

import importlib
import logging

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    @pytest.mark.anyio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["checks"] == {"api": True, "storage": True}

    @pytest.mark.anyio
    async def test_version(self, client: AsyncClient) -> None:
        resp = await client.get("/api/version")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "devutils"
        assert "version" in data
        assert "environment" in data


class TestJsonEndpoints:
    @pytest.mark.anyio
    async def test_prettify(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/prettify", json={"input": '{"b":2,"a":1}'})
        assert resp.status_code == 200
        assert resp.json() == {"output": '{\n  "b": 2,\n  "a": 1\n}', "error": None}

    @pytest.mark.anyio
    async def test_minify(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/minify", json={"input": '{ "a" : [1, 2] }'})
        assert resp.json() == {"output": '{"a":[1,2]}', "error": None}

    @pytest.mark.anyio
    async def test_invalid_json_is_not_an_http_error(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/prettify", json={"input": "not json"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["output"] == ""
        assert data["error"].startswith("Expecting value")

    @pytest.mark.anyio
    async def test_lone_surrogate_comes_back_escaped(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/prettify", json={"input": '"\\ud800"'})
        assert resp.status_code == 200
        assert resp.json() == {"output": '"\\ud800"', "error": None}
        history = (await client.get("/v1/history/json")).json()
        assert [item["input"] for item in history] == ['"\\ud800"']

    @pytest.mark.anyio
    async def test_overflowing_number_renders_null(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/minify", json={"input": "[1e400]"})
        assert resp.json() == {"output": "[null]", "error": None}

    @pytest.mark.anyio
    async def test_missing_input_field_is_422(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/json/prettify", json={})
        assert resp.status_code == 422


class TestTimeEndpoints:
    @pytest.mark.anyio
    async def test_convert_seconds(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/time/convert", json={"input": "1765296135"})
        assert resp.status_code == 200
        assert resp.json() == {
            "local_format": "2025-12-09 16:02:15",
            "unix_seconds": "1765296135",
            "unix_milliseconds": "1765296135000",
            "rfc3339_format": "2025-12-09T16:02:15.000Z",
            "error": None,
        }

    @pytest.mark.anyio
    async def test_convert_error(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/time/convert", json={"input": "-1"})
        data = resp.json()
        assert data["error"] == "Timestamp must be a positive number."
        assert data["unix_seconds"] == ""

    @pytest.mark.anyio
    async def test_relative_date_text_is_rejected(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/time/convert", json={"input": "now"})
        assert resp.json()["error"] == (
            "Invalid date or time string format. Please check the examples below."
        )
        assert (await client.get("/v1/history/time")).json() == []

    @pytest.mark.anyio
    async def test_presets(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/time/presets")
        assert resp.json() == {
            "current_datetime": "2025-12-09 18:02:15",
            "unix_seconds": "1765303335",
            "unix_milliseconds": "1765303335000",
        }


class TestHistoryEndpoints:
    @pytest.mark.anyio
    async def test_history_starts_empty(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/history/json")
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.anyio
    async def test_successful_conversions_are_listed(self, client: AsyncClient) -> None:
        await client.post("/v1/json/prettify", json={"input": " [1] "})
        await client.post("/v1/json/minify", json={"input": "[2]"})
        resp = await client.get("/v1/history/json")
        data = resp.json()
        assert [item["input"] for item in data] == ["[2]", "[1]"]
        assert data[0]["timestamp"] == "2025-12-09 18:02:15"
        assert set(data[0]) == {"id", "input", "timestamp"}

    @pytest.mark.anyio
    async def test_tools_have_separate_histories(self, client: AsyncClient) -> None:
        await client.post("/v1/time/convert", json={"input": "1765296135"})
        assert (await client.get("/v1/history/json")).json() == []
        time_history = (await client.get("/v1/history/time")).json()
        assert [item["input"] for item in time_history] == ["1765296135"]

    @pytest.mark.anyio
    async def test_failures_are_not_listed(self, client: AsyncClient) -> None:
        await client.post("/v1/json/prettify", json={"input": "not json"})
        await client.post("/v1/time/convert", json={"input": "0"})
        assert (await client.get("/v1/history/json")).json() == []
        assert (await client.get("/v1/history/time")).json() == []

    @pytest.mark.anyio
    async def test_restore(self, client: AsyncClient) -> None:
        await client.post("/v1/time/convert", json={"input": " 2025/12/09 18:00:00 "})
        entry = (await client.get("/v1/history/time")).json()[0]
        resp = await client.get(f"/v1/history/time/{entry['id']}/restore")
        assert resp.status_code == 200
        assert resp.json() == {"input": "2025/12/09 18:00:00"}

    @pytest.mark.anyio
    async def test_restore_unknown_is_404(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/history/time/nope/restore")
        assert resp.status_code == 404

    @pytest.mark.anyio
    async def test_delete_entry(self, client: AsyncClient) -> None:
        await client.post("/v1/json/prettify", json={"input": "[1]"})
        await client.post("/v1/json/prettify", json={"input": "[2]"})
        entries = (await client.get("/v1/history/json")).json()
        resp = await client.delete(f"/v1/history/json/{entries[1]['id']}")
        assert resp.status_code == 204
        remaining = (await client.get("/v1/history/json")).json()
        assert [item["input"] for item in remaining] == ["[2]"]

    @pytest.mark.anyio
    async def test_delete_unknown_is_404(self, client: AsyncClient) -> None:
        resp = await client.delete("/v1/history/json/nope")
        assert resp.status_code == 404

    @pytest.mark.anyio
    async def test_clear(self, client: AsyncClient, blob_store) -> None:
        await client.post("/v1/json/prettify", json={"input": "[1]"})
        resp = await client.delete("/v1/history/json")
        assert resp.status_code == 204
        assert (await client.get("/v1/history/json")).json() == []
        assert blob_store.get("json-history") is None

    @pytest.mark.anyio
    async def test_unknown_tool_is_422(self, client: AsyncClient) -> None:
        resp = await client.get("/v1/history/yaml")
        assert resp.status_code == 422


class TestAppLogging:
    def test_import_leaves_stdlib_logging_unconfigured(self, monkeypatch) -> None:
        import devutils.api.main as main_module

        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        importlib.reload(main_module)
        assert calls == []
