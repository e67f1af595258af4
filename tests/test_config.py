"""Tests for analyzer configuration."""

import json
from pathlib import Path

import pytest

from library_change.core.config import DEFAULT_BUILD_FILES_REGEX, AnalyzerConfig, load_config
from library_change.errors import AnalysisSetupError


def test_defaults():
    """Test the default settings."""
    config = AnalyzerConfig()
    assert config.build_files_regex == DEFAULT_BUILD_FILES_REGEX
    assert config.output_dir is None
    assert config.build_files_pattern().fullmatch("app/build.gradle")


@pytest.mark.parametrize("regex", ["", "(unclosed", "[a-"])
def test_invalid_regex_is_a_setup_error(regex):
    """Test that missing or invalid patterns are rejected up front."""
    with pytest.raises(AnalysisSetupError) as exc_info:
        AnalyzerConfig.create(build_files_regex=regex)
    assert "build_files_regex" in str(exc_info.value)


def test_setup_error_is_value_error():
    with pytest.raises(ValueError):
        AnalyzerConfig.create(build_files_regex="(")


def test_load_config(tmp_path):
    """Test loading settings from a JSON file."""
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"build_files_regex": r".*\.gradle", "output_dir": str(tmp_path / "out")})
    )
    config = load_config(config_file)
    assert config.build_files_regex == r".*\.gradle"
    assert config.output_dir == tmp_path / "out"


def test_load_config_rejects_unknown_keys(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"code_files_regex": ".*"}))
    with pytest.raises(AnalysisSetupError):
        load_config(config_file)


def test_load_config_invalid_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")
    with pytest.raises(AnalysisSetupError):
        load_config(config_file)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(AnalysisSetupError):
        load_config(tmp_path / "missing.json")


def test_merged_overrides_only_given_values():
    """Test that ``None`` overrides keep the existing value."""
    config = AnalyzerConfig(build_files_regex=r".*\.gradle")
    merged = config.merged(build_files_regex=None, output_dir=Path("out"))
    assert merged.build_files_regex == r".*\.gradle"
    assert merged.output_dir == Path("out")
