from __future__ import annotations

from .clarity import ClarityRuleSet
from .structure import StructureRuleSet
from .style import StyleRuleSet

__all__ = ["ClarityRuleSet", "StyleRuleSet", "StructureRuleSet"]
