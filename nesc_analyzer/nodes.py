"""Node kinds of a parsed nesC translation unit.

Only the shapes the analyzers read are modelled: component declarations and
their provides/uses specifications. Every kind is a frozen pydantic model with
a ``kind`` tag, so a serialized tree validates into the right classes through
a discriminated union.

Nodes compare and hash by identity. Two ``Identifier`` nodes spelling the same
name are different nodes, which is what lets an alias identifier serve as a
dictionary key distinct from every other occurrence of its text.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class AstNode(BaseModel):
	model_config = ConfigDict(frozen=True)

	kind: str

	def __eq__(self, other: object) -> bool:
		return self is other

	def __hash__(self) -> int:
		return id(self)


class Identifier(AstNode):
	kind: Literal["identifier"] = "identifier"
	name: str
	offset: Optional[int] = None
	line: Optional[int] = None
	column: Optional[int] = None

	NAME: ClassVar[str] = "name"

	def __str__(self) -> str:
		return self.name


class InterfaceType(AstNode):
	"""``interface Read<uint16_t>``: the interface name plus type arguments."""

	kind: Literal["interface_type"] = "interface_type"
	name: Optional[Identifier] = None
	arguments: Tuple[Identifier, ...] = ()

	NAME: ClassVar[str] = "name"


class InterfaceReference(AstNode):
	"""``interface Read as R``; ``rename`` is only set when ``as`` is used."""

	kind: Literal["interface_reference"] = "interface_reference"
	name: Optional[InterfaceType] = None
	rename: Optional[Identifier] = None

	NAME: ClassVar[str] = "name"
	RENAME: ClassVar[str] = "rename"


class ParameterizedInterface(AstNode):
	kind: Literal["parameterized_interface"] = "parameterized_interface"
	reference: Optional[InterfaceReference] = None
	parameters: Tuple[Identifier, ...] = ()

	REFERENCE: ClassVar[str] = "reference"


class ParameterizedInterfaceList(AstNode):
	kind: Literal["parameterized_interface_list"] = "parameterized_interface_list"
	interfaces: Tuple[ParameterizedInterface, ...] = ()


class Access(AstNode):
	"""One ``provides`` or ``uses`` clause of a specification."""

	kind: Literal["access"] = "access"
	direction: Literal["provides", "uses"]
	interfaces: Optional[ParameterizedInterfaceList] = None

	INTERFACES: ClassVar[str] = "interfaces"


class AccessList(AstNode):
	"""The specification block of a component."""

	kind: Literal["access_list"] = "access_list"
	accesses: Tuple[Access, ...] = ()


class Component(AstNode):
	kind: Literal["component"] = "component"
	component_kind: Literal["module", "configuration"]
	name: Identifier
	specification: AccessList
	# identifiers used in the implementation block, e.g. the R of call R.read()
	body: Tuple["Node", ...] = ()


class TranslationUnit(AstNode):
	kind: Literal["translation_unit"] = "translation_unit"
	file: Optional[str] = None
	declarations: Tuple["Node", ...] = ()


Node = Annotated[
	Union[
		Identifier,
		InterfaceType,
		InterfaceReference,
		ParameterizedInterface,
		ParameterizedInterfaceList,
		Access,
		AccessList,
		Component,
		TranslationUnit,
	],
	Field(discriminator="kind"),
]

Component.model_rebuild()
TranslationUnit.model_rebuild()
