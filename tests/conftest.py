"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from tests.fixtures.sample_models import CAR_RENTAL_PROJECT, MINIMAL_PROJECT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def write_model(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing model data to a JSON file in tmp_path."""

    def _write(data: dict[str, Any], name: str = "model.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_model_file(write_model: Callable[..., Path]) -> Path:
    """Return path to a JSON file holding a single kind."""
    return write_model(MINIMAL_PROJECT, "minimal.json")


@pytest.fixture
def car_rental_file(write_model: Callable[..., Path]) -> Path:
    """Return path to the car rental model."""
    return write_model(CAR_RENTAL_PROJECT, "car-rental.json")
