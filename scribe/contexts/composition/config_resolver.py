"""
Pipeline configuration loading.

Reads an optional YAML file with OmegaConf and turns it into the objects the
pipeline takes: a StyleResolver with preset overrides, classification
thresholds and page geometry. Every block is optional.

Example config (scribe.yaml):

    styles:
      resume:
        section_header:
          font_size_pt: 15
          color: "1f4e79"
      coverLetter:
        date:
          alignment: left
    thresholds:
      section_header_max_length: 45
    page:
      margin_pt: 40

Examples:
    >>> config = load_pipeline_config(Path("scribe.yaml"))
    >>> result = render(text, "resume", config.page_config,
    ...                 resolver=config.resolver, thresholds=config.thresholds)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from scribe.contexts.composition.logger import _log_debug, _log_info
from scribe.contexts.rendering.layout_data_structures import PageConfig
from scribe.contexts.structuring.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds
from scribe.contexts.styling.exceptions import StylePresetConfigError
from scribe.contexts.styling.style_resolver import DEFAULT_RESOLVER, StyleResolver

load_dotenv()
CONFIG_PATH_ENV = "SCRIBE_CONFIG_PATH"

CONFIG_SECTIONS = ("styles", "thresholds", "page")


@dataclass(frozen=True)
class PipelineConfig:
    """
    Resolved pipeline configuration.

    Attributes:
        resolver: Style presets (defaults plus overrides)
        thresholds: Classification length cutoffs
        page_config: Page geometry
        config_path: File the configuration was loaded from, None for defaults
    """

    resolver: StyleResolver = DEFAULT_RESOLVER
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS
    page_config: PageConfig = PageConfig()
    config_path: Optional[Path] = None


def get_config_path() -> Optional[Path]:
    """Return the config path from SCRIBE_CONFIG_PATH, or None when unset."""
    value = os.getenv(CONFIG_PATH_ENV)
    return Path(value) if value else None


def _build_dataclass(cls, values: Dict[str, Any], config_path: Path, section: str):
    """Instantiate a frozen dataclass from a config block, rejecting unknown keys."""
    if not isinstance(values, Mapping):
        raise StylePresetConfigError(
            f"Expected a mapping, got {type(values).__name__}", config_path, key=section
        )
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise StylePresetConfigError(
            f"Unknown key(s) {unknown}. Available keys: {sorted(known)}",
            config_path,
            key=section,
        )
    try:
        return cls(**values)
    except (TypeError, ValueError) as e:
        raise StylePresetConfigError(f"Invalid value: {e}", config_path, key=section) from e


def load_pipeline_config(config_path: Optional[Path] = None) -> PipelineConfig:
    """
    Load pipeline configuration from YAML.

    Args:
        config_path: YAML file (defaults to SCRIBE_CONFIG_PATH; built-in
            defaults when neither is set)

    Returns:
        PipelineConfig

    Raises:
        FileNotFoundError: If the config file doesn't exist
        StylePresetConfigError: If the file has unknown sections, keys or invalid values
    """
    if config_path is None:
        config_path = get_config_path()
    if config_path is None:
        _log_debug("No pipeline config set, using defaults")
        return PipelineConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Pipeline config not found at {config_path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise StylePresetConfigError(f"Could not parse config: {e}", config_path) from e
    if not isinstance(data, dict):
        raise StylePresetConfigError("Config root must be a mapping", config_path)

    unknown_sections = sorted(set(data) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise StylePresetConfigError(
            f"Unknown config section(s) {unknown_sections}. Available sections: {list(CONFIG_SECTIONS)}",
            config_path,
        )

    styles = data.get("styles") or {}
    if not isinstance(styles, Mapping):
        raise StylePresetConfigError(
            f"Expected a mapping, got {type(styles).__name__}", config_path, key="styles"
        )
    resolver = StyleResolver(styles, config_path=config_path)
    thresholds = _build_dataclass(
        ClassificationThresholds, data.get("thresholds") or {}, config_path, "thresholds"
    )
    page_config = _build_dataclass(PageConfig, data.get("page") or {}, config_path, "page")

    _log_info(f"Loaded pipeline config from {config_path}")
    return PipelineConfig(
        resolver=resolver,
        thresholds=thresholds,
        page_config=page_config,
        config_path=config_path,
    )
