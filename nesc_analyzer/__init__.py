"""Semantic analysis of nesC component specifications for refactoring.

Modules:
- nodes.py: Node kinds of a parsed translation unit (pydantic models).
- query.py: Kind-agnostic tree traversal and field lookup.
- base.py: Shared analyzer base with once-only cached facts.
- component.py: Interface references and aliases of a component.
- loader.py: Validation of serialized trees.
- model.py: Fact records produced by the analyzers.
- summarize.py: Deterministic textual summaries of facts.
- rename.py: Alias rename preconditions and edit planning.
"""

from .component import ComponentAstAnalyzer, analyzers_for, find_component, find_components, unit_facts
from .errors import MalformedAstError
from .loader import load_translation_unit, read_translation_unit
from .query import AstQuery

__all__ = [
	"AstQuery",
	"ComponentAstAnalyzer",
	"MalformedAstError",
	"analyzers_for",
	"find_component",
	"find_components",
	"load_translation_unit",
	"read_translation_unit",
	"unit_facts",
]
