"""
Rendering Context

Responsibilities:
- Formats a parsed resume document as a fixed-width, ANSI-styled terminal view
- Manages layout settings (width, margins, footer, "In Numbers" figures)

Owns: Terminal layout, colors, render settings
Never: Parses markup or reads resume files
"""

from termresume.contexts.rendering.config import RenderConfig, Stat, load_render_config
from termresume.contexts.rendering.formatter import render_resume

__all__ = [
    "render_resume",
    "RenderConfig",
    "Stat",
    "load_render_config",
]
