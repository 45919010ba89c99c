"""
Composition Context

Responsibilities:
- Orchestrates one document run: split, classify, style, render both ways, diagnose
- Loads pipeline configuration (style overrides, thresholds, page geometry) from YAML
- Logs a summary of every run

Owns: The order of pipeline stages and the RenderedDocument result
Never: Implements classification, styling or layout itself
"""

from scribe.contexts.composition.config_resolver import PipelineConfig, load_pipeline_config
from scribe.contexts.composition.pipeline import RenderedDocument, render, render_many

__all__ = [
    "render",
    "render_many",
    "RenderedDocument",
    "PipelineConfig",
    "load_pipeline_config",
]
