#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rule-producing plugins layered on top of the CommonMark rules."""

from html2md.plugins.gfm import gfm_plugin
from html2md.plugins.table import table_plugin

__all__ = ["gfm_plugin", "table_plugin"]
