"""Contains logging related functionality."""

import logging
import logging.config
import typing
from pathlib import Path

import yaml


def init_logging(filepath: Path, level: str | None = None) -> dict[str, typing.Any]:  # pragma: no cover
    """Read logging config yaml file from `filepath` and initialize logging by applying it globally.

    :param filepath: Path to the logging configuration yaml file.
    :param level: Optional level overriding the root logger level of the file.
    :returns: The logging configuration as dict.
    """
    config: dict[str, typing.Any] = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    if level is not None:
        config.setdefault("root", {})["level"] = level
    logging.config.dictConfig(config)
    return config
