from __future__ import annotations

import json
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from .errors import MalformedAstError
from .nodes import TranslationUnit

logger = logging.getLogger(__name__)


def load_translation_unit(data: Union[Dict[str, Any], str, bytes]) -> TranslationUnit:
	"""Validate a serialized tree (a dict or JSON text) into node models."""
	try:
		if isinstance(data, (str, bytes)):
			return TranslationUnit.model_validate_json(data)
		return TranslationUnit.model_validate(data)
	except ValidationError as e:
		logger.debug("rejected translation unit: %s", e)
		raise MalformedAstError(f"invalid translation unit: {e.error_count()} error(s)\n{e}") from e


def read_translation_unit(path: str) -> TranslationUnit:
	with open(path, "r", encoding="utf-8") as fh:
		try:
			data = json.load(fh)
		except json.JSONDecodeError as e:
			raise MalformedAstError(f"{path} is not valid JSON: {e}") from e
		except UnicodeDecodeError as e:
			raise MalformedAstError(f"{path} is not valid UTF-8: {e}") from e
	return load_translation_unit(data)
