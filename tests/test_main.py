# ABOUTME: Tests for the CLI entry point
# ABOUTME: Runs commands through asyncclick's CliRunner with the network-facing pieces patched out

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from asyncclick.testing import CliRunner

from rocket_lineups.core.models import InvasionRecord
from rocket_lineups.extraction.base import PageAcquisitionError
from rocket_lineups.main import app
from rocket_lineups.persistence.json_sink import JsonDatasetSink


def _records() -> list[InvasionRecord]:
    return [InvasionRecord(category="Bug-type Grunt", quote="Bug: “Go!”", original_quote="Go!")]


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROCKET_LINEUPS_SPECIES_DATA", raising=False)


def test_main_function_exists():
    assert callable(app)


@pytest.mark.asyncio
async def test_main_command_help():
    result = await CliRunner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "Rocket Lineups" in result.output


@pytest.mark.asyncio
async def test_logging_status():
    result = await CliRunner().invoke(app, ["logging-status"])

    assert result.exit_code == 0
    assert "Logging Configuration" in result.output


@pytest.mark.asyncio
async def test_build_requires_species_data():
    result = await CliRunner().invoke(app, ["--json", "build"])

    assert result.exit_code != 0
    assert "Species data required" in result.output


@pytest.mark.asyncio
async def test_build_writes_dataset(tmp_path):
    with (
        patch("rocket_lineups.main.PokedexLookup.from_source", new_callable=AsyncMock),
        patch("rocket_lineups.main.Crawl4AIPageProvider"),
        patch("rocket_lineups.main.RocketInvasionPipeline") as mock_pipeline_class,
    ):
        mock_pipeline_class.return_value.run = AsyncMock(return_value=_records())

        result = await CliRunner().invoke(
            app, ["--json", "build", "--species-data", "pokedex.json", "--output-dir", str(tmp_path / "out")]
        )

    assert result.exit_code == 0, result.output
    written = JsonDatasetSink.load(tmp_path / "out" / "rocketInvasions.json")
    assert written == _records()


@pytest.mark.asyncio
async def test_build_failure_writes_nothing(tmp_path):
    with (
        patch("rocket_lineups.main.PokedexLookup.from_source", new_callable=AsyncMock),
        patch("rocket_lineups.main.Crawl4AIPageProvider"),
        patch("rocket_lineups.main.RocketInvasionPipeline") as mock_pipeline_class,
    ):
        mock_pipeline_class.return_value.run = AsyncMock(side_effect=PageAcquisitionError("Failed to crawl page"))

        result = await CliRunner().invoke(
            app, ["--json", "build", "--species-data", "pokedex.json", "--output-dir", str(tmp_path / "out")]
        )

    assert result.exit_code != 0
    assert "Failed to crawl page" in result.output
    assert not (tmp_path / "out").exists()


@pytest.mark.asyncio
async def test_build_missing_species_file(tmp_path):
    result = await CliRunner().invoke(
        app, ["--json", "build", "--species-data", "missing.json", "--output-dir", str(tmp_path / "out")]
    )

    assert result.exit_code == 1
    assert "Could not load species data from missing.json" in result.output
    assert not (tmp_path / "out").exists()


@pytest.mark.asyncio
async def test_build_malformed_species_file(tmp_path):
    (tmp_path / "pokedex.json").write_text("{not json", encoding="utf-8")

    result = await CliRunner().invoke(
        app, ["--json", "build", "--species-data", "pokedex.json", "--output-dir", str(tmp_path / "out")]
    )

    assert result.exit_code == 1
    assert "Could not load species data" in result.output
    assert not (tmp_path / "out").exists()


@pytest.mark.asyncio
async def test_build_species_download_failure(tmp_path):
    with patch(
        "rocket_lineups.main.PokedexLookup.from_source",
        new_callable=AsyncMock,
        side_effect=httpx.ConnectError("connection refused"),
    ):
        result = await CliRunner().invoke(
            app,
            ["--json", "build", "--species-data", "https://data.example.com/pokedex.json", "--output-dir", "out"],
        )

    assert result.exit_code == 1
    assert "connection refused" in result.output
    assert not (tmp_path / "out").exists()


@pytest.mark.asyncio
async def test_show_json(tmp_path):
    JsonDatasetSink(tmp_path).write(_records())

    result = await CliRunner().invoke(app, ["--json", "show", str(tmp_path / "rocketInvasions.json")])

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["category"] == "Bug-type Grunt"


@pytest.mark.asyncio
async def test_show_table(tmp_path):
    JsonDatasetSink(tmp_path).write(_records())

    result = await CliRunner().invoke(app, ["show", str(tmp_path / "rocketInvasions.min.json")])

    assert result.exit_code == 0
