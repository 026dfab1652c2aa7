from __future__ import annotations

from typing import Dict, List

from .model import ComponentFacts, Summaries, UnitFacts


def summarize_component(f: ComponentFacts) -> str:
	parts: List[str] = []
	parts.append(f"{(f.kind or 'component').capitalize()} {f.component}")
	if f.interfaces:
		parts.append(f"  Interfaces: {', '.join(f.interfaces)}")
	if f.aliases:
		parts.append(f"  Aliases: {', '.join(f'{a} -> {i}' for a, i in sorted(f.aliases.items()))}")
	return "\n".join(parts)


def summarize_unit(facts: UnitFacts) -> Summaries:
	per_component: Dict[str, str] = {}
	for c in facts.components:
		per_component[c.component] = summarize_component(c)

	reference_count = sum(len(c.references) for c in facts.components)
	alias_count = sum(len(c.aliases) for c in facts.components)
	global_overview = (
		f"Translation unit {facts.file or '<memory>'}: {len(facts.components)} components, "
		f"{reference_count} interface references, {alias_count} aliases"
	)

	return Summaries(global_overview=global_overview, per_component=per_component)
