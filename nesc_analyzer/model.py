from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel


class InterfaceReferenceFacts(BaseModel):
	interface: Optional[str] = None
	alias: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None


class ComponentFacts(BaseModel):
	component: str
	kind: Optional[str] = None
	interfaces: List[str] = []
	aliases: Dict[str, str] = {}
	references: List[InterfaceReferenceFacts] = []


class UnitFacts(BaseModel):
	file: Optional[str] = None
	components: List[ComponentFacts] = []


class Summaries(BaseModel):
	global_overview: str
	per_component: Dict[str, str]


class AnalyzeResult(BaseModel):
	facts: UnitFacts
	summaries: Summaries


class AliasResolution(BaseModel):
	component: str
	name: str
	is_alias: bool
	interface: Optional[str] = None


class RenameInfo(BaseModel):
	old_name: str
	new_name: str


class TextEdit(BaseModel):
	offset: Optional[int] = None
	length: int
	line: Optional[int] = None
	column: Optional[int] = None
	old_text: str
	new_text: str


class RenameStatus(BaseModel):
	errors: List[str] = []
	warnings: List[str] = []

	@property
	def ok(self) -> bool:
		return not self.errors


class RenamePlan(BaseModel):
	component: str
	info: RenameInfo
	status: RenameStatus
	edits: List[TextEdit] = []
