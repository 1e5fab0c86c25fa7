"""
Render Settings

Layout defaults for the terminal view and loading of YAML overrides.

Overrides are merged onto the structured defaults with OmegaConf, so an
override file only needs the keys it changes:

    # render.yaml
    footer_label: npx mfyz
    stats:
      - value: 85
        label: products launched
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from termresume.contexts.rendering.logger import log_config_source

load_dotenv()

DEFAULT_WIDTH = 80
DEFAULT_PADDING = 2
DEFAULT_FOOTER_LABEL = "termresume"
DEFAULT_SKIP_DEGREES = ["High School"]


@dataclass
class Stat:
    """One figure in the "In Numbers" section."""

    value: int
    label: str


@dataclass
class RenderConfig:
    """
    Terminal layout settings.

    Attributes:
        width: Total line width in columns
        padding: Left margin applied to every line
        footer_label: Text before the version in the footer
        skip_degrees: Education degrees left out of the view
        stats: Figures for the "In Numbers" section (section omitted when empty)
    """

    width: int = DEFAULT_WIDTH
    padding: int = DEFAULT_PADDING
    footer_label: str = DEFAULT_FOOTER_LABEL
    skip_degrees: List[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DEGREES))
    stats: List[Stat] = field(default_factory=list)

    @property
    def inner_width(self) -> int:
        """Usable columns between the margins."""
        return self.width - self.padding * 2


def load_render_config(config_path: Optional[Path] = None) -> RenderConfig:
    """
    Load render settings, merging an optional YAML override onto the defaults.

    Args:
        config_path: Override file (defaults to RENDER_CONFIG_PATH env variable;
            no file means defaults only)

    Returns:
        Validated RenderConfig

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        omegaconf.errors.ValidationError: If a value has the wrong type
        omegaconf.errors.ConfigKeyError: If the override names an unknown key
    """
    if config_path is None and os.getenv("RENDER_CONFIG_PATH"):
        config_path = Path(os.getenv("RENDER_CONFIG_PATH"))

    log_config_source(config_path)

    base = OmegaConf.structured(RenderConfig)
    if config_path is None:
        return OmegaConf.to_object(base)

    if not config_path.is_file():
        raise FileNotFoundError(f"Render config not found: {config_path}")

    merged = OmegaConf.merge(base, OmegaConf.load(config_path))
    return OmegaConf.to_object(merged)
