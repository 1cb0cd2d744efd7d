"""
Tests for CLI settings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from modulator_cli.config import Settings


class TestSettings:
    """Test defaults, environment overrides and path resolution"""

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_DURATION", "DEFAULT_SAMPLE_RATE", "PREVIEW_SAMPLES", "OUTPUT_DIR"):
            monkeypatch.delenv(f"MODULATOR_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_duration == 1.0
        assert settings.default_sample_rate == 1000.0
        assert settings.preview_samples == 10
        assert settings.output_dir == Path(".")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MODULATOR_DEFAULT_SAMPLE_RATE", "44100")
        monkeypatch.setenv("MODULATOR_PREVIEW_SAMPLES", "3")

        settings = Settings(_env_file=None)

        assert settings.default_sample_rate == 44100.0
        assert settings.preview_samples == 3

    def test_invalid_sample_rate(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_sample_rate=0)

    def test_infinite_duration(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, default_duration=float("inf"))

    def test_resolve_relative_output(self, tmp_path):
        settings = Settings(_env_file=None, output_dir=tmp_path)
        assert settings.resolve_output("a/b.json") == tmp_path / "a" / "b.json"

    def test_resolve_absolute_output(self, tmp_path):
        settings = Settings(_env_file=None, output_dir=Path("elsewhere"))
        target = tmp_path / "x.json"
        assert settings.resolve_output(target) == target
