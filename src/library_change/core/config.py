"""Analyzer configuration."""

import json
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from library_change.errors import AnalysisSetupError

DEFAULT_BUILD_FILES_REGEX = r".*build\.gradle"


class AnalyzerConfig(BaseModel):
    """Settings of a library change analysis run.

    ``build_files_regex`` selects build files among a commit's changed
    artifacts; it must fully match the lower-cased artifact path.
    """

    build_files_regex: str = DEFAULT_BUILD_FILES_REGEX
    output_dir: Optional[Path] = None

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("build_files_regex")
    @classmethod
    def check_regex(cls, value: str) -> str:
        if not value:
            raise ValueError("missing regular expression for identifying build files")
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from e
        return value

    @classmethod
    def create(cls, **settings) -> "AnalyzerConfig":
        """Build a config, turning validation failures into setup errors."""
        try:
            return cls(**settings)
        except ValidationError as e:
            raise AnalysisSetupError(_describe(e)) from e

    def build_files_pattern(self) -> "re.Pattern[str]":
        return re.compile(self.build_files_regex)

    def merged(self, **overrides) -> "AnalyzerConfig":
        """Return a copy with every non-``None`` override applied."""
        settings = self.model_dump()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return AnalyzerConfig.create(**settings)


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "config"
        problems.append(f'"{field}": {item["msg"]}')
    return "Invalid configuration: " + "; ".join(problems)


def load_config(path: Path) -> AnalyzerConfig:
    """Load an ``AnalyzerConfig`` from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise AnalysisSetupError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise AnalysisSetupError(f"Config file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise AnalysisSetupError(f"Config file {path} must contain a JSON object")
    return AnalyzerConfig.create(**data)
