"""
Resume File Location

Resolves which resume document to render and reads it from disk.

Lookup order:
    1. Explicit path passed by the caller (CLI argument)
    2. RESUME_PATH environment variable (.env supported)
    3. resume.yaml in the current working directory

Usage:
    from termresume.utils.resume_file import get_resume_file, read_resume

    text = read_resume(get_resume_file())
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

load_dotenv()
DEFAULT_RESUME_FILENAME = "resume.yaml"


class ResumeNotFoundError(FileNotFoundError):
    """Raised when the resume document does not exist (fatal, reported before parsing)."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path.name} not found (looked for {path})")


def get_resume_file(identifier: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the resume document path.

    Args:
        identifier: Explicit path to the document (optional)

    Returns:
        Path to the resume document (not checked for existence)
    """
    if identifier:
        return Path(identifier).expanduser()

    env_path = os.getenv("RESUME_PATH")
    if env_path:
        return Path(env_path).expanduser()

    return Path.cwd() / DEFAULT_RESUME_FILENAME


def read_resume(path: Path) -> str:
    """
    Read the resume document text.

    Args:
        path: Path to the resume document

    Returns:
        Full document text

    Raises:
        ResumeNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise ResumeNotFoundError(path)
    return path.read_text(encoding="utf-8")
