from __future__ import annotations

from typing import Optional

from nesc_analyzer.nodes import (
	Access,
	AccessList,
	Component,
	Identifier,
	InterfaceReference,
	InterfaceType,
	ParameterizedInterface,
	ParameterizedInterfaceList,
	TranslationUnit,
)


def ident(name: str, line: Optional[int] = None, column: Optional[int] = None, offset: Optional[int] = None) -> Identifier:
	return Identifier(name=name, line=line, column=column, offset=offset)


def iface(interface, alias=None) -> ParameterizedInterface:
	"""``interface <interface> [as <alias>]``; str arguments become fresh identifiers."""
	if isinstance(interface, str):
		interface = ident(interface)
	if isinstance(alias, str):
		alias = ident(alias)
	return ParameterizedInterface(
		reference=InterfaceReference(name=InterfaceType(name=interface), rename=alias)
	)


def provides(*interfaces: ParameterizedInterface) -> Access:
	return Access(direction="provides", interfaces=ParameterizedInterfaceList(interfaces=interfaces))


def uses(*interfaces: ParameterizedInterface) -> Access:
	return Access(direction="uses", interfaces=ParameterizedInterfaceList(interfaces=interfaces))


def component(name: str, *accesses: Access, body=(), kind: str = "module") -> Component:
	return Component(
		component_kind=kind,
		name=ident(name),
		specification=AccessList(accesses=accesses),
		body=body,
	)


def unit(*components: Component, file: Optional[str] = "Test.nc") -> TranslationUnit:
	return TranslationUnit(file=file, declarations=components)
