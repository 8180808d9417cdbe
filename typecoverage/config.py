"""ABOUTME: Configuration loaders for custom type charts.
ABOUTME: Handles loading and validating type chart YAML files."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from typecoverage.roster import canonicalize_type
from typecoverage.settings import settings
from typecoverage.utils.type_chart import DEFAULT_CHART, TypeChart, TypeRelations


def _canonical_list(names: list[str]) -> list[str]:
    return list(dict.fromkeys(canonicalize_type(name) for name in names))


class TypeRelationsConfig(BaseModel):
    """Relations of a single type as written in a chart file."""

    weaknesses: list[str] = Field(default_factory=list)
    resistances: list[str] = Field(default_factory=list)
    immunities: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)

    @field_validator("weaknesses", "resistances", "immunities", "strengths")
    @classmethod
    def _canonicalize(cls, names: list[str]) -> list[str]:
        return _canonical_list(names)

    def referenced_types(self) -> set[str]:
        """Return every type named in any of the four relations."""
        return {*self.weaknesses, *self.resistances, *self.immunities, *self.strengths}

    def to_relations(self) -> TypeRelations:
        return TypeRelations(
            weaknesses=frozenset(self.weaknesses),
            resistances=frozenset(self.resistances),
            immunities=frozenset(self.immunities),
            strengths=frozenset(self.strengths),
        )


class TypeChartConfig(BaseModel):
    """A complete type chart; key order is the vocabulary order."""

    types: dict[str, TypeRelationsConfig]

    @field_validator("types")
    @classmethod
    def _canonicalize_keys(cls, types: dict[str, TypeRelationsConfig]) -> dict[str, TypeRelationsConfig]:
        canonical: dict[str, TypeRelationsConfig] = {}
        for name, relations in types.items():
            key = canonicalize_type(name)
            if key in canonical:
                raise ValueError(f"Type '{key}' is defined more than once")
            canonical[key] = relations
        return canonical

    @model_validator(mode="after")
    def _check_references(self) -> "TypeChartConfig":
        if not self.types:
            raise ValueError("Type chart must define at least one type")

        known = set(self.types)
        for name, relations in self.types.items():
            unknown = relations.referenced_types() - known
            if unknown:
                raise ValueError(f"Type '{name}' references unknown types: {', '.join(sorted(unknown))}")
        return self

    def to_chart(self) -> TypeChart:
        """Build an immutable TypeChart from this configuration."""
        return TypeChart.from_relations(
            {name: relations.to_relations() for name, relations in self.types.items()},
            types=self.types,
        )


def load_type_chart(chart_path: Path | None = None) -> TypeChart:
    """Load a type chart from YAML, falling back to the built-in chart.

    Args:
        chart_path: Path to the chart file. Defaults to settings.TYPE_CHART_PATH,
            and to the built-in chart when neither is set.

    Returns:
        The loaded TypeChart.

    Raises:
        FileNotFoundError: If the chart file doesn't exist.
        ValueError: If the chart file is invalid.
    """
    if chart_path is None:
        chart_path = settings.TYPE_CHART_PATH
    if chart_path is None:
        return DEFAULT_CHART

    if not chart_path.exists():
        raise FileNotFoundError(f"Type chart not found: {chart_path}")

    with chart_path.open(encoding="utf-8") as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Type chart is not valid YAML: {chart_path}") from e

    return TypeChartConfig.model_validate(raw_config).to_chart()
