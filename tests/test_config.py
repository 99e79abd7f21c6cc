"""Tests for layout configuration."""

import pytest
from pydantic import ValidationError

from schema_diagram.core import LayoutConfig


def test_defaults():
    config = LayoutConfig()

    assert config.iterations == 100
    assert (config.canvas_width, config.canvas_height) == (1920, 1080)
    assert config.min_distance == 0.1
    assert config.seed is None
    assert config.start_temperature() == 192


@pytest.mark.parametrize("field", ["iterations", "canvas_width", "canvas_height", "min_distance"])
def test_rejects_non_positive(field):
    with pytest.raises(ValidationError):
        LayoutConfig(**{field: 0})


def test_from_env_reads_prefixed_variables():
    environ = {
        "SCHEMA_DIAGRAM_ITERATIONS": "50",
        "SCHEMA_DIAGRAM_SEED": "7",
        "SCHEMA_DIAGRAM_CANVAS_WIDTH": "800",
        "UNRELATED": "x",
    }

    config = LayoutConfig.from_env(environ)

    assert config.iterations == 50
    assert config.seed == 7
    assert config.canvas_width == 800


def test_from_env_overrides_win_and_none_is_ignored():
    environ = {"SCHEMA_DIAGRAM_ITERATIONS": "50"}

    config = LayoutConfig.from_env(environ, iterations=10, seed=None)

    assert config.iterations == 10
    assert config.seed is None


def test_from_env_uses_os_environ(monkeypatch):
    monkeypatch.setenv("SCHEMA_DIAGRAM_MIN_DISTANCE", "0.5")

    assert LayoutConfig.from_env().min_distance == 0.5
