from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from nesc_analyzer.component import ComponentAstAnalyzer, find_component, unit_facts
from nesc_analyzer.errors import MalformedAstError
from nesc_analyzer.loader import load_translation_unit
from nesc_analyzer.model import AliasResolution, AnalyzeResult, RenameInfo, RenamePlan
from nesc_analyzer.nodes import TranslationUnit
from nesc_analyzer.rename import plan_alias_rename
from nesc_analyzer.summarize import summarize_unit


app = FastAPI(title="nesC Component Analyzer")


class AnalyzeRequest(BaseModel):
	unit: Dict[str, Any]


class ResolveRequest(BaseModel):
	unit: Dict[str, Any]
	name: str
	component: Optional[str] = None


class RenameRequest(BaseModel):
	unit: Dict[str, Any]
	old_name: str
	new_name: str
	component: Optional[str] = None


def _load(data: Dict[str, Any]) -> TranslationUnit:
	try:
		return load_translation_unit(data)
	except MalformedAstError as e:
		raise HTTPException(status_code=400, detail=str(e))


def _analyzer(data: Dict[str, Any], name: Optional[str]) -> ComponentAstAnalyzer:
	unit = _load(data)
	component = find_component(unit, name)
	if component is None:
		raise HTTPException(status_code=404, detail=f"Unknown component: {name or '<first>'}")
	return ComponentAstAnalyzer.for_component(unit, component)


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	unit = _load(req.unit)
	try:
		facts = unit_facts(unit)
	except MalformedAstError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return AnalyzeResult(facts=facts, summaries=summarize_unit(facts))


@app.post("/resolve", response_model=AliasResolution)
def resolve(req: ResolveRequest) -> AliasResolution:
	analyzer = _analyzer(req.unit, req.component)
	return AliasResolution(
		component=analyzer.component_name,
		name=req.name,
		is_alias=analyzer.is_alias_name(req.name),
		interface=analyzer.interface_name_for_alias_name(req.name),
	)


@app.post("/rename", response_model=RenamePlan)
def rename(req: RenameRequest) -> RenamePlan:
	analyzer = _analyzer(req.unit, req.component)
	return plan_alias_rename(analyzer, RenameInfo(old_name=req.old_name, new_name=req.new_name))


def create_app() -> FastAPI:
	return app
