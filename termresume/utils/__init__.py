"""
Shared utilities for termresume.

Common functionality used across contexts:
- Logger setup
- Resume file location and loading
- Date formatting
- Package metadata
"""

from termresume.utils.dates import date_range, format_date
from termresume.utils.resume_file import get_resume_file, read_resume

__all__ = ["date_range", "format_date", "get_resume_file", "read_resume"]
