from __future__ import annotations

import threading
from functools import cached_property
from typing import Any, Iterable, List, Optional

from .nodes import AstNode
from .query import AstQuery


class memoized_property(cached_property):
	"""``cached_property`` whose first computation is serialized per instance.

	Once the value is stored in the instance ``__dict__`` the descriptor is
	no longer consulted, so the lock is only taken while the cache is cold.
	"""

	def __get__(self, instance, owner=None):
		if instance is None:
			return self
		with instance._cache_lock:
			return super().__get__(instance, owner)


class AstAnalyzer:
	"""Base for analyzers deriving facts from an immutable tree.

	Subclasses expose derived facts as :class:`memoized_property` attributes:
	each is computed on first access and kept for the life of the instance.
	The tree must not change while an analyzer bound to it is alive.
	"""

	def __init__(self, query: Optional[AstQuery] = None):
		self._query = query or AstQuery()
		self._cache_lock = threading.RLock()

	def get_ast_query(self) -> AstQuery:
		return self._query

	def collect_fields(self, parents: Iterable[AstNode], field_name: str) -> List[Any]:
		return self._query.collect_fields(parents, field_name)
