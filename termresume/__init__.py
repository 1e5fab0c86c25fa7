"""
termresume - Terminal Resume Renderer

Reads a human-editable resume document and prints it as a styled,
fixed-width terminal view.

Architecture:
- Parsing Context: indentation-delimited markup to a generic value tree
- Rendering Context: value tree to ANSI-decorated terminal layout
"""

__version__ = "0.1.0"
