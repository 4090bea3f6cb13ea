#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2md.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from html2md.options.base import CloneFrozenMixin
from html2md.options.cleaner import CleanerOptions
from html2md.options.converter import ConverterOptions

__all__ = ["CloneFrozenMixin", "CleanerOptions", "ConverterOptions"]
