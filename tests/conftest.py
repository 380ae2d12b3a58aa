"""Pytest fixtures for tests."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from launchlight.palettes import PaletteTable, builtin_table


@pytest.fixture
def classic_table():
    """Small palette table with a known entry at classic[5]."""
    return PaletteTable({
        "classic": [
            (0, 0, 0),
            (255, 255, 255),
            (255, 0, 0),
            (0, 255, 0),
            (0, 0, 255),
            (12, 200, 40),
        ],
        "mono": [(0, 0, 0), (128, 128, 128), (255, 255, 255)],
    })


@pytest.fixture
def builtin_palettes():
    """The palettes that ship with launchlight."""
    return builtin_table()


@pytest.fixture
def palettes_dir(tmp_path: Path) -> Path:
    """Directory holding one JSON and one YAML palette file."""
    directory = tmp_path / "palettes"
    directory.mkdir()

    (directory / "warm.json").write_text(json.dumps({
        "name": "warm",
        "colors": [[0, 0, 0], [255, 128, 0], [255, 64, 0]],
    }))
    (directory / "cool.yaml").write_text(
        "colors:\n"
        "  - [0, 0, 0]\n"
        "  - [0, 128, 255]\n"
    )
    return directory


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_args(tmp_path: Path, palettes_dir: Path) -> list[str]:
    """Root options that keep the CLI away from the user's home directory."""
    return ["--config", str(tmp_path / "config.json"), "--palettes-dir", str(palettes_dir)]
