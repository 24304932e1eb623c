"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bunnygraph.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from bunnygraph.domain.filtering import BASE_GROUP, DEFAULT_DELIMITER, STANDARD_PREFIXES
from bunnygraph.domain.relations import DEFAULT_SEPARATOR
from bunnygraph.domain.suggestions import DEFAULT_LIMIT, DEFAULT_WEIGHT


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    separator: str = DEFAULT_SEPARATOR
    strict: bool = False

    @field_validator("separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            msg = "separator must not be empty"
            raise ValueError(msg)
        return value


class FilterConfig(BaseModel):
    """[filter] section."""

    model_config = {"frozen": True}

    delimiter: str = DEFAULT_DELIMITER
    standard_prefixes: list[str] = Field(default_factory=lambda: list(STANDARD_PREFIXES))
    base_group: str = BASE_GROUP


class SummaryConfig(BaseModel):
    """[summary] section — merging of equivalent nodes."""

    model_config = {"frozen": True}

    enabled: bool = False


class SuggestConfig(BaseModel):
    """[suggest] section."""

    model_config = {"frozen": True}

    top: int = Field(default=DEFAULT_LIMIT, ge=1)
    weight: int = DEFAULT_WEIGHT


class StyleConfig(BaseModel):
    """[style] section — colors handed to renderers and exports."""

    model_config = {"frozen": True}

    merged_color: str = "#ADD8E6"
    unmerged_color: str = "#FFB6C1"

    def color_for(self, color_class: str) -> str:
        return self.unmerged_color if color_class == "unmerged" else self.merged_color
