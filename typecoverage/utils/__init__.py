# ABOUTME: Utils package for typecoverage utility functions.
# ABOUTME: Contains the static type relation chart.

from typecoverage.utils.type_chart import (
    DEFAULT_CHART,
    NO_EFFECT,
    NOT_VERY_EFFECTIVE,
    SUPER_EFFECTIVE,
    TYPES,
    TypeChart,
    TypeRelations,
)

__all__ = [
    "DEFAULT_CHART",
    "NOT_VERY_EFFECTIVE",
    "NO_EFFECT",
    "SUPER_EFFECTIVE",
    "TYPES",
    "TypeChart",
    "TypeRelations",
]
