"""
writing_editor package exports the editing operations for library consumers.
"""

from __future__ import annotations

from .clarity_metrics import check_clarity_metrics
from .config import EditorConfig, config_from_dict, config_from_yaml, load_config
from .operations import (
    InvalidArgumentError,
    edit_document,
    optimize_section,
)
from .pipeline import DocumentProcessor, process_document
from .structure_analysis import analyze_structure
from .tools import ToolName, call_tool

__all__ = [
    "EditorConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "InvalidArgumentError",
    "edit_document",
    "optimize_section",
    "analyze_structure",
    "check_clarity_metrics",
    "DocumentProcessor",
    "process_document",
    "ToolName",
    "call_tool",
]

__version__ = "0.1.0"
