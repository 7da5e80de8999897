"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import pytest
import respx

from weatherboard.cli import main

FEED_URL = "https://opendata.cwa.gov.tw/api/v1/rest/datastore/F-C0032-001"


@pytest.fixture
def empty_config(tmp_path: Path) -> Path:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["feed"]["api_key"] == "CWA-****"
        assert data["schedule"]["refresh_interval_minutes"] == 15

    def test_regions(self, empty_config: Path, capsys):
        result = main(["--config", str(empty_config), "regions"])
        assert result == 0
        out = capsys.readouterr().out
        assert "north (北部): 基隆市, 臺北市" in out
        assert "outlying (離島): 澎湖縣, 金門縣, 連江縣" in out

    def test_refresh_without_key(self, empty_config: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(empty_config), "refresh"])
        assert result == 1
        assert "API key" in capsys.readouterr().out

    @respx.mock
    def test_refresh_json(self, config_yaml_path: Path, cwa_forecast: dict, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        respx.get(FEED_URL).mock(return_value=httpx.Response(200, json=cwa_forecast))

        result = main([
            "--config", str(config_yaml_path), "refresh", "--json", "--region", "north",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert [c["name"] for c in data] == ["基隆市", "臺北市"]

    @respx.mock
    def test_refresh_text(self, config_yaml_path: Path, cwa_forecast: dict, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        respx.get(FEED_URL).mock(return_value=httpx.Response(200, json=cwa_forecast))

        result = main(["--config", str(config_yaml_path), "refresh"])
        assert result == 0
        out = capsys.readouterr().out
        assert "高雄市" in out
        assert "5 published" in out

    @respx.mock
    def test_refresh_http_error(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        respx.get(FEED_URL).mock(return_value=httpx.Response(500))

        result = main(["--config", str(config_yaml_path), "refresh"])
        assert result == 1
        assert "HTTP 500" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "typo.yaml"), "regions"])
        assert result == 1
        assert "config file not found" in capsys.readouterr().out

    def test_default_config_used_when_present(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "default.yaml").write_text(
            "schedule:\n  refresh_interval_minutes: 45\n"
        )
        result = main(["config", "get", "schedule.refresh_interval_minutes"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "45"

    def test_defaults_without_any_config(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        monkeypatch.chdir(tmp_path)
        result = main(["config", "get", "feed.dataset_id"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "F-C0032-001"

    def test_config_get_section(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "get", "feed"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["timeout_seconds"] == 5.0
        assert "api_key" not in data

    def test_config_get_api_key_refused(self, config_yaml_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", str(config_yaml_path), "config", "get", "feed.api_key"])
        assert result == 1
        assert "CWA-TEST-KEY" not in capsys.readouterr().out

    def test_config_get_unknown_key(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "get", "feed.nope"])
        assert result == 1
        assert "Config key not found: feed.nope" in capsys.readouterr().out
