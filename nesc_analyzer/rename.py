"""Renaming an interface alias (the ``R`` in ``interface Read as R``).

The planner only computes edits; applying them to a buffer is left to the
editor. Anything the analyzer cannot establish is reported as a failed
precondition in :class:`~nesc_analyzer.model.RenameStatus`.
"""

from __future__ import annotations

import logging
import re
from typing import List, Set

from .component import ComponentAstAnalyzer, interface_identifier
from .model import RenameInfo, RenamePlan, RenameStatus, TextEdit
from .nodes import Identifier

logger = logging.getLogger(__name__)

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

NESC_KEYWORDS = frozenset(
	{
		"as", "async", "atomic", "call", "command", "component", "components",
		"configuration", "event", "generic", "implementation", "includes",
		"interface", "module", "new", "norace", "post", "provides", "signal",
		"task", "uses", "abstract", "extends",
		# C keywords
		"auto", "break", "case", "char", "const", "continue", "default", "do",
		"double", "else", "enum", "extern", "float", "for", "goto", "if",
		"inline", "int", "long", "register", "return", "short", "signed",
		"sizeof", "static", "struct", "switch", "typedef", "union", "unsigned",
		"void", "volatile", "while",
	}
)


def _instance_names(analyzer: ComponentAstAnalyzer) -> Set[str]:
	# names visible in the component: aliases, and interfaces used without one
	names = set(analyzer.alias_names)
	for reference in analyzer.interface_references:
		identifier = interface_identifier(reference)
		if reference.rename is None and identifier is not None:
			names.add(identifier.name)
	return names


def check_alias_rename(analyzer: ComponentAstAnalyzer, info: RenameInfo) -> RenameStatus:
	status = RenameStatus()
	component = analyzer.component_name
	if not analyzer.is_alias_name(info.old_name):
		status.errors.append(f"'{info.old_name}' is not an interface alias in component {component}")
	if not IDENTIFIER_RE.match(info.new_name):
		status.errors.append(f"'{info.new_name}' is not a valid identifier")
	elif info.new_name in NESC_KEYWORDS:
		status.errors.append(f"'{info.new_name}' is a reserved word")
	if info.new_name == info.old_name:
		status.errors.append("the new name is the same as the old name")
	elif info.new_name in _instance_names(analyzer):
		status.errors.append(f"'{info.new_name}' is already an interface name in component {component}")
	if not status.errors:
		if analyzer.interface_name_for_alias_name(info.old_name) == info.new_name:
			status.warnings.append(
				f"'{info.new_name}' is the name of the aliased interface; the alias becomes redundant"
			)
		declarations = [a for a in analyzer.referenced_interface_alias_identifiers if a.name == info.old_name]
		if len(declarations) > 1:
			status.warnings.append(f"alias '{info.old_name}' is declared {len(declarations)} times")
		if info.new_name == analyzer.component_name:
			status.warnings.append(f"'{info.new_name}' is also the name of component {component}")
		if analyzer.component is None:
			status.warnings.append("no component body available; only alias declarations are renamed")
	return status


def _edit(identifier: Identifier, new_name: str) -> TextEdit:
	return TextEdit(
		offset=identifier.offset,
		length=len(identifier.name),
		line=identifier.line,
		column=identifier.column,
		old_text=identifier.name,
		new_text=new_name,
	)


def plan_alias_rename(analyzer: ComponentAstAnalyzer, info: RenameInfo) -> RenamePlan:
	"""Edits renaming alias ``info.old_name`` to ``info.new_name``.

	Covers the alias declarations in the specification and every identifier
	in the component body spelled like the alias. Interface names are never
	touched, even when they are spelled the same way.
	"""
	status = check_alias_rename(analyzer, info)
	plan = RenamePlan(component=analyzer.component_name, info=info, status=status)
	if not status.ok:
		logger.info("rename %s -> %s in %s rejected: %s", info.old_name, info.new_name, plan.component, status.errors)
		return plan

	targets: List[Identifier] = [
		alias for alias in analyzer.referenced_interface_alias_identifiers if alias.name == info.old_name
	]
	seen = set(targets)
	excluded = set(analyzer.referenced_interface_identifiers)
	if analyzer.component is not None:
		query = analyzer.get_ast_query()
		for node in analyzer.component.body:
			candidates = [node] if isinstance(node, Identifier) else []
			candidates.extend(query.descendants_of_type(node, Identifier))
			for identifier in candidates:
				if identifier.name != info.old_name or identifier in seen or identifier in excluded:
					continue
				seen.add(identifier)
				targets.append(identifier)

	plan.edits = [_edit(identifier, info.new_name) for identifier in targets]
	logger.info(
		"planned %d edit(s) renaming %s -> %s in %s", len(plan.edits), info.old_name, info.new_name, plan.component
	)
	return plan
