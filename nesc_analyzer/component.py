"""Semantic facts about the specification of a single nesC component.

A specification such as::

	provides interface Read<uint16_t> as R;
	uses interface Timer<TMilli>;

references the interfaces ``Read`` and ``Timer`` and introduces the alias
``R`` for ``Read``. A rename refactoring has to know which names are aliases
and what they stand for before it touches any occurrence, and that is what
:class:`ComponentAstAnalyzer` answers.

Lookups never raise for a well-formed but incomplete tree. A reference with
no interface name, or an alias without a resolvable interface, simply
contributes nothing. Only a structurally broken tree raises
:class:`~nesc_analyzer.errors.MalformedAstError`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional, Tuple

from .base import AstAnalyzer, memoized_property
from .model import ComponentFacts, InterfaceReferenceFacts, UnitFacts
from .nodes import (
	Access,
	AccessList,
	Component,
	Identifier,
	InterfaceReference,
	ParameterizedInterface,
	TranslationUnit,
)
from .query import AstQuery

logger = logging.getLogger(__name__)


def interface_identifier(reference: InterfaceReference) -> Optional[Identifier]:
	interface_type = reference.name
	if interface_type is None:
		return None
	return interface_type.name


class ComponentAstAnalyzer(AstAnalyzer):
	"""Derived facts for one (component name, specification) pair.

	Construction does no traversal. Each derived view is computed on first
	access and cached for the lifetime of the instance; build a new analyzer
	for a new tree instead of rebinding this one.
	"""

	def __init__(
		self,
		root: Optional[TranslationUnit],
		component_identifier: Identifier,
		specification: AccessList,
		query: Optional[AstQuery] = None,
		component: Optional[Component] = None,
	):
		super().__init__(query)
		self.root = root
		self.specification = specification
		self.component = component
		self._component_identifier = component_identifier

	@classmethod
	def for_component(
		cls,
		root: Optional[TranslationUnit],
		component: Component,
		query: Optional[AstQuery] = None,
	) -> "ComponentAstAnalyzer":
		return cls(root, component.name, component.specification, query=query, component=component)

	@property
	def component_identifier(self) -> Identifier:
		return self._component_identifier

	@property
	def component_name(self) -> str:
		return self._component_identifier.name

	@memoized_property
	def interface_references(self) -> Tuple[InterfaceReference, ...]:
		"""Every interface reference of the specification, in declaration order.

		An interface listed twice yields two entries.
		"""
		query = self.get_ast_query()
		accesses = query.descendants_of_type(self.specification, Access)
		# accesses of other shapes have no interface list and drop out here
		interface_lists = self.collect_fields(accesses, Access.INTERFACES)
		parameterized: List[ParameterizedInterface] = []
		for interface_list in interface_lists:
			parameterized.extend(query.descendants_of_type(interface_list, ParameterizedInterface))
		references = tuple(self.collect_fields(parameterized, ParameterizedInterface.REFERENCE))
		logger.debug(
			"component %s: %d interface references in %d accesses",
			self.component_name,
			len(references),
			len(accesses),
		)
		return references

	@memoized_property
	def referenced_interface_identifiers(self) -> Tuple[Identifier, ...]:
		identifiers: List[Identifier] = []
		for reference in self.interface_references:
			identifier = interface_identifier(reference)
			if identifier is not None:
				identifiers.append(identifier)
		return tuple(identifiers)

	@memoized_property
	def referenced_interface_names(self) -> FrozenSet[str]:
		return frozenset(identifier.name for identifier in self.referenced_interface_identifiers)

	@memoized_property
	def referenced_interface_alias_identifiers(self) -> Tuple[Identifier, ...]:
		"""Alias identifiers introduced with ``as``, in declaration order."""
		return tuple(
			reference.rename for reference in self.interface_references if reference.rename is not None
		)

	@memoized_property
	def alias_names(self) -> FrozenSet[str]:
		return frozenset(alias.name for alias in self.referenced_interface_alias_identifiers)

	@memoized_property
	def alias_to_interface(self) -> Mapping[Identifier, Identifier]:
		"""Alias identifier -> identifier of the interface it renames.

		Keys are the alias nodes themselves, compared by identity. References
		without an alias, or whose interface name cannot be resolved, have no
		entry.
		"""
		mapping = {}
		for reference in self.interface_references:
			alias = reference.rename
			if alias is None:
				continue
			interface = interface_identifier(reference)
			if interface is None:
				logger.debug(
					"component %s: alias %s has no resolvable interface", self.component_name, alias.name
				)
				continue
			mapping[alias] = interface
		return MappingProxyType(mapping)

	def interface_identifier_for_alias(self, alias: Identifier) -> Optional[Identifier]:
		return self.alias_to_interface.get(alias)

	def alias_identifier_for_alias_name(self, name: str) -> Optional[Identifier]:
		"""First alias identifier spelled ``name``, or ``None``.

		Duplicate alias names are not rejected here; the one declared first wins.
		"""
		for alias in self.referenced_interface_alias_identifiers:
			if alias.name == name:
				return alias
		return None

	def interface_identifier_for_alias_name(self, name: str) -> Optional[Identifier]:
		alias = self.alias_identifier_for_alias_name(name)
		if alias is None:
			return None
		return self.interface_identifier_for_alias(alias)

	def interface_name_for_alias_name(self, name: str) -> Optional[str]:
		interface = self.interface_identifier_for_alias_name(name)
		if interface is None:
			return None
		return interface.name

	def is_alias_name(self, name: str) -> bool:
		return self.alias_identifier_for_alias_name(name) is not None

	def facts(self) -> ComponentFacts:
		references: List[InterfaceReferenceFacts] = []
		for reference in self.interface_references:
			interface = interface_identifier(reference)
			alias = reference.rename
			anchor = interface if interface is not None else alias
			references.append(
				InterfaceReferenceFacts(
					interface=interface.name if interface is not None else None,
					alias=alias.name if alias is not None else None,
					line=anchor.line if anchor is not None else None,
					column=anchor.column if anchor is not None else None,
				)
			)
		aliases = {}
		for alias, interface in self.alias_to_interface.items():
			aliases.setdefault(alias.name, interface.name)
		return ComponentFacts(
			component=self.component_name,
			kind=self.component.component_kind if self.component is not None else None,
			interfaces=[identifier.name for identifier in self.referenced_interface_identifiers],
			aliases=aliases,
			references=references,
		)


def find_components(root: TranslationUnit, query: Optional[AstQuery] = None) -> List[Component]:
	query = query or AstQuery()
	return query.descendants_of_type(root, Component)


def find_component(
	root: TranslationUnit, name: Optional[str] = None, query: Optional[AstQuery] = None
) -> Optional[Component]:
	"""The component called ``name``, or the first one when ``name`` is ``None``."""
	for component in find_components(root, query):
		if name is None or component.name.name == name:
			return component
	return None


def analyzers_for(root: TranslationUnit, query: Optional[AstQuery] = None) -> List[ComponentAstAnalyzer]:
	query = query or AstQuery()
	return [
		ComponentAstAnalyzer.for_component(root, component, query=query)
		for component in find_components(root, query)
	]


def unit_facts(root: TranslationUnit, query: Optional[AstQuery] = None) -> UnitFacts:
	return UnitFacts(file=root.file, components=[analyzer.facts() for analyzer in analyzers_for(root, query)])
