from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn

from nesc_analyzer.component import ComponentAstAnalyzer, find_component, unit_facts
from nesc_analyzer.errors import MalformedAstError
from nesc_analyzer.loader import read_translation_unit
from nesc_analyzer.model import AliasResolution, AnalyzeResult, RenameInfo
from nesc_analyzer.rename import plan_alias_rename
from nesc_analyzer.summarize import summarize_unit

logger = logging.getLogger("nesc_analyzer.cli")


class UnknownComponentError(LookupError):
	pass


def _analyzer(args: argparse.Namespace) -> ComponentAstAnalyzer:
	unit = read_translation_unit(args.path)
	component = find_component(unit, args.component)
	if component is None:
		what = f"component {args.component}" if args.component else "component"
		raise UnknownComponentError(f"no {what} in {args.path}")
	return ComponentAstAnalyzer.for_component(unit, component)


def cmd_analyze(args: argparse.Namespace) -> None:
	unit = read_translation_unit(args.path)
	facts = unit_facts(unit)
	result = AnalyzeResult(facts=facts, summaries=summarize_unit(facts))
	print(json.dumps(result.model_dump(), indent=2))


def cmd_resolve(args: argparse.Namespace) -> None:
	analyzer = _analyzer(args)
	resolution = AliasResolution(
		component=analyzer.component_name,
		name=args.name,
		is_alias=analyzer.is_alias_name(args.name),
		interface=analyzer.interface_name_for_alias_name(args.name),
	)
	print(json.dumps(resolution.model_dump(), indent=2))


def cmd_rename(args: argparse.Namespace) -> None:
	analyzer = _analyzer(args)
	plan = plan_alias_rename(analyzer, RenameInfo(old_name=args.old_name, new_name=args.new_name))
	print(json.dumps(plan.model_dump(), indent=2))
	if not plan.status.ok:
		sys.exit(2)


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="nesc-analyzer")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Print interface and alias facts of every component")
	pa.add_argument("path", help="Path to a translation unit AST (JSON)")
	pa.set_defaults(func=cmd_analyze)

	pr = sub.add_parser("resolve", help="Resolve a name against a component's interface aliases")
	pr.add_argument("path", help="Path to a translation unit AST (JSON)")
	pr.add_argument("name")
	pr.add_argument("--component", default=None, help="Component name (default: first component)")
	pr.set_defaults(func=cmd_resolve)

	pn = sub.add_parser("rename", help="Plan the edits renaming an interface alias")
	pn.add_argument("path", help="Path to a translation unit AST (JSON)")
	pn.add_argument("old_name")
	pn.add_argument("new_name")
	pn.add_argument("--component", default=None, help="Component name (default: first component)")
	pn.set_defaults(func=cmd_rename)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	try:
		args.func(args)
	except (MalformedAstError, UnknownComponentError, OSError) as e:
		logger.error("%s", e)
		sys.exit(1)


if __name__ == "__main__":
	main()
