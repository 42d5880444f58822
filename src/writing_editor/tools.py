from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping

from .clarity_metrics import check_clarity_metrics
from .config import EditorConfig
from .operations import InvalidArgumentError, edit_document, optimize_section
from .structure_analysis import analyze_structure

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    """Operations exposed to callers, addressed by name."""

    EDIT_DOCUMENT = "edit_document"
    ANALYZE_STRUCTURE = "analyze_structure"
    CHECK_CLARITY_METRICS = "check_clarity_metrics"
    OPTIMIZE_SECTION = "optimize_section"


@dataclass(slots=True)
class ToolResult:
    """Text payload for a tool call; ``is_error`` marks failures."""

    text: str
    is_error: bool = False


def _edit_document(args: Mapping[str, Any], config: EditorConfig) -> dict[str, Any]:
    return edit_document(
        args.get("text"),
        args.get("documentType") or "section",
        args.get("outputFormat") or "tracked_changes",
        config,
    ).to_dict()


def _analyze_structure(args: Mapping[str, Any], config: EditorConfig) -> dict[str, Any]:
    text = args.get("text")
    if not isinstance(text, str):
        raise InvalidArgumentError("'text' is required and must be a string.")
    expected = args.get("expectedSections")
    if expected is not None and (
        not isinstance(expected, list) or not all(isinstance(s, str) for s in expected)
    ):
        raise InvalidArgumentError("'expectedSections' must be a list of strings.")
    return analyze_structure(text, expected).to_dict()


def _check_clarity(args: Mapping[str, Any], config: EditorConfig) -> dict[str, Any]:
    text = args.get("text")
    if not isinstance(text, str):
        raise InvalidArgumentError("'text' is required and must be a string.")
    return check_clarity_metrics(text).to_dict()


def _optimize_section(args: Mapping[str, Any], config: EditorConfig) -> dict[str, Any]:
    return optimize_section(args.get("text"), args.get("sectionType"), config).to_dict()


HANDLERS: Dict[ToolName, Callable[[Mapping[str, Any], EditorConfig], dict[str, Any]]] = {
    ToolName.EDIT_DOCUMENT: _edit_document,
    ToolName.ANALYZE_STRUCTURE: _analyze_structure,
    ToolName.CHECK_CLARITY_METRICS: _check_clarity,
    ToolName.OPTIMIZE_SECTION: _optimize_section,
}


def call_tool(
    name: str,
    arguments: Mapping[str, Any] | None,
    config: EditorConfig | None = None,
) -> ToolResult:
    """Dispatch a named operation and wrap its payload (or failure) as text."""
    try:
        tool = ToolName(name)
    except ValueError:
        return ToolResult(f"Error: Unknown tool: {name}", is_error=True)
    if arguments is None:
        return ToolResult("Error: No arguments provided", is_error=True)

    try:
        payload = HANDLERS[tool](arguments, config or EditorConfig())
    except Exception as exc:
        logger.warning("Tool %s failed: %s", tool.value, exc)
        return ToolResult(f"Error: {exc}", is_error=True)
    return ToolResult(json.dumps(payload, indent=2))
