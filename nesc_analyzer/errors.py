from __future__ import annotations

from typing import Optional


class MalformedAstError(ValueError):
	"""Raised when a tree is structurally broken.

	Semantic gaps (a reference without a name, a missing alias) never raise;
	only a node lacking one of its mandatory fields, or a child slot holding
	something that is not a node, does.
	"""

	def __init__(self, message: str, kind: Optional[str] = None, field: Optional[str] = None):
		super().__init__(message)
		self.kind = kind
		self.field = field

	@classmethod
	def missing_field(cls, kind: str, field: str) -> "MalformedAstError":
		return cls(f"{kind} node is missing mandatory field '{field}'", kind=kind, field=field)

	@classmethod
	def bad_child(cls, kind: str, field: str, value: object) -> "MalformedAstError":
		return cls(
			f"{kind}.{field} holds {type(value).__name__}, expected an AST node",
			kind=kind,
			field=field,
		)
