from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from insight_hub.main import create_app


def test_api_index_lists_endpoints(client) -> None:
    payload = client.get("/api").json()

    assert payload["version"] == "1.0.0"
    assert payload["endpoints"]["insights"]["search"] == "GET /api/insights/search/:query"
    assert "timers" in payload["endpoints"]


def test_health_reports_counts(client) -> None:
    client.post("/api/timers", json={"duration": 60})
    payload = client.get("/api/health").json()

    assert payload == {"status": "ok", "insights": 1, "timers": 1, "version": "1.0.0"}


def test_factory_seeds_sample_data_when_enabled(server_settings) -> None:
    seeded = create_app(server_settings)
    empty = create_app(server_settings.model_copy(update={"SEED_SAMPLE_DATA": False}))

    assert len(seeded.state.insight_repository) == 1
    assert len(empty.state.insight_repository) == 0


def test_static_dir_serves_spa_shell(server_settings, tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text("<html>insights</html>", encoding="utf-8")
    (tmp_path / "app.js").write_text("console.log('hi')", encoding="utf-8")
    app = create_app(server_settings.model_copy(update={"STATIC_DIR": str(tmp_path)}))

    with TestClient(app) as tc:
        assert tc.get("/").text == "<html>insights</html>"
        assert tc.get("/app.js").text == "console.log('hi')"
        assert tc.get("/insights/some-client-route").text == "<html>insights</html>"
        assert tc.get("/api/unknown").status_code == 404
        assert tc.get("/api/insights").status_code == 200


def test_static_dir_never_serves_files_outside_root(server_settings, tmp_path: Path) -> None:
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("shell", encoding="utf-8")
    (tmp_path / "private.txt").write_text("hidden", encoding="utf-8")
    app = create_app(server_settings.model_copy(update={"STATIC_DIR": str(site)}))

    with TestClient(app) as tc:
        response = tc.get("/%2E%2E/private.txt")

    assert "hidden" not in response.text
