from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .errors import MalformedAstError
from .nodes import AstNode

N = TypeVar("N", bound=AstNode)

KindSpec = Union[Type[N], Tuple[Type[AstNode], ...]]


class AstQuery:
	"""Kind-agnostic traversal over nodes from :mod:`nesc_analyzer.nodes`.

	Holds no state; one instance can be shared by any number of analyzers.
	"""

	def field_by_name(self, node: AstNode, field_name: str) -> Optional[Any]:
		"""Return the value stored under ``field_name``, or ``None``.

		Unknown field names and unset optional fields both read as ``None``.
		"""
		if field_name not in type(node).model_fields:
			return None
		return node.__dict__.get(field_name)

	def children(self, node: AstNode) -> Iterator[AstNode]:
		"""Yield direct child nodes in field declaration order."""
		kind = node.kind
		for field_name, info in type(node).model_fields.items():
			if field_name not in node.__dict__:
				if info.is_required():
					raise MalformedAstError.missing_field(kind, field_name)
				continue
			value = node.__dict__[field_name]
			if isinstance(value, AstNode):
				yield value
			elif isinstance(value, (tuple, list)):
				for item in value:
					if not isinstance(item, AstNode):
						raise MalformedAstError.bad_child(kind, field_name, item)
					yield item

	def walk(self, root: AstNode) -> Iterator[AstNode]:
		"""Pre-order walk of every descendant of ``root``, excluding ``root``."""
		stack: List[Iterator[AstNode]] = [self.children(root)]
		while stack:
			child = next(stack[-1], None)
			if child is None:
				stack.pop()
				continue
			yield child
			stack.append(self.children(child))

	def descendants_of_type(self, root: AstNode, kind: KindSpec) -> List[N]:
		"""All descendants of ``root`` that are instances of ``kind``, in document order."""
		return [node for node in self.walk(root) if isinstance(node, kind)]

	def collect_fields(self, parents: Iterable[AstNode], field_name: str) -> List[Any]:
		"""Value of ``field_name`` on each parent, skipping parents where it is ``None``."""
		values: List[Any] = []
		for parent in parents:
			value = self.field_by_name(parent, field_name)
			if value is not None:
				values.append(value)
		return values
