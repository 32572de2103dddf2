# -------------------------------------------------------------------------
# config_loader.py
#
# Settings for the scor package.
#
#   * Reads an optional YAML file whose path comes from SCOR_CONFIG_PATH
#     (a .env file in the working directory is honoured).
#   * Provides a thread-safe singleton instance.
#   * Supports reloading at runtime.
#   * Builds named Scores from the `scores:` section.
#
# Example file:
#
#   log_level: DEBUG
#   json_logs: false
#   scores:
#     stars:     {min: 0, max: 5000, weight: 0.6}
#     downloads: {min: 0, max: 100000}
#
# Usage:
#   from scor.config_loader import Config
#
#   cfg = Config.instance()
#   scores = cfg.build_scores({"stars": lambda repo: repo["stars"]})
# -------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .score import Score, scor

logger = logging.getLogger(__name__)

ENV_VAR = "SCOR_CONFIG_PATH"

_SCORE_KEYS = {"min", "max", "weight"}


class _Config:
    """
    Internal implementation of the configuration object.

    The public API is exposed via the ``Config`` wrapper class below.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._lock = threading.RLock()
        self._path = Path(path) if path is not None else None
        self._settings: Mapping[str, Any] = {}
        self._load_from_disk()

    # -----------------------------------------------------------------
    # Private helpers
    # -----------------------------------------------------------------
    def _load_from_disk(self) -> None:
        """
        Read the YAML file into ``self._settings``.  Without a path the
        settings stay empty and every accessor returns its default.
        """
        if self._path is None:
            self._settings = {}
            return

        if not self._path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self._path}")

        with self._path.open("r", encoding="utf-8") as fp:
            try:
                loaded = yaml.safe_load(fp) or {}
            except yaml.YAMLError as exc:
                raise ValueError(
                    f"Failed to parse YAML config at {self._path}: {exc}"
                ) from exc

        if not isinstance(loaded, dict):
            raise TypeError(
                f"Config file {self._path} must contain a mapping at top level."
            )

        self._settings = dict(loaded)
        logger.debug("loaded configuration from %s", self._path)

    # -----------------------------------------------------------------
    # Public API – read-only accessors
    # -----------------------------------------------------------------
    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def raw(self) -> Mapping[str, Any]:
        """The entire configuration mapping."""
        return self._settings

    @property
    def log_level(self) -> str:
        return str(self._settings.get("log_level", "WARNING")).upper()

    @property
    def json_logs(self) -> bool:
        return bool(self._settings.get("json_logs", True))

    @property
    def score_definitions(self) -> Mapping[str, Mapping[str, Any]]:
        """``name -> {min, max, weight}`` as written in the file."""
        definitions = self._settings.get("scores") or {}
        if not isinstance(definitions, dict):
            raise TypeError("`scores` must be a mapping of name -> definition")
        for name, definition in definitions.items():
            if not isinstance(definition, dict):
                raise TypeError(f"definition of score {name!r} must be a mapping")
            unknown = set(definition) - _SCORE_KEYS
            if unknown:
                raise ValueError(
                    f"unknown keys for score {name!r}: {sorted(unknown)}"
                )
        return definitions

    def build_scores(
        self, extractors: Optional[Mapping[str, Callable]] = None
    ) -> Dict[str, Score]:
        """
        Create one Score per configured definition.  The extractor registered
        under the same name becomes its ``to_value``.
        """
        extractors = extractors or {}
        return {
            name: scor(
                min=definition.get("min"),
                max=definition.get("max"),
                to_value=extractors.get(name),
                weight=definition.get("weight"),
            )
            for name, definition in self.score_definitions.items()
        }

    def reload(self) -> None:
        with self._lock:
            self._load_from_disk()


# -------------------------------------------------------------------------
# Public wrapper – singleton access point
# -------------------------------------------------------------------------
class Config:
    """
    Public façade that provides a **singleton** instance of ``_Config``.
    The file is located through the ``SCOR_CONFIG_PATH`` environment
    variable the first time ``Config.instance()`` is called.

    Example:
        >>> from scor.config_loader import Config
        >>> cfg = Config.instance()
        >>> cfg.log_level
        'WARNING'
    """

    _instance: _Config | None = None
    _instance_lock = threading.Lock()

    @classmethod
    def instance(cls) -> _Config:
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:   # double-checked locking
                    load_dotenv(find_dotenv(usecwd=True))
                    path = os.getenv(ENV_VAR)
                    cls._instance = _Config(Path(path) if path else None)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton; the next ``instance()`` re-reads the environment."""
        with cls._instance_lock:
            cls._instance = None

    def __getattr__(self, name: str) -> Any:
        return getattr(self.instance(), name)
