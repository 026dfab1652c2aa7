from builders import component, iface, ident, provides, unit, uses
from nesc_analyzer.component import ComponentAstAnalyzer
from nesc_analyzer.model import RenameInfo
from nesc_analyzer.rename import check_alias_rename, plan_alias_rename


def sense_component():
	# module SenseC { uses interface Read as R; uses interface Leds; }
	# implementation { ... call R.read(); ... event void R.readDone() ... }
	return component(
		"SenseC",
		uses(iface(ident("Read", line=3, column=17, offset=40), ident("R", line=3, column=25, offset=48))),
		uses(iface("Leds")),
		body=(
			ident("R", line=9, column=10, offset=120),
			ident("Leds", line=10, column=5, offset=140),
			ident("R", line=12, column=14, offset=180),
		),
	)


def analyzer_for(c):
	return ComponentAstAnalyzer.for_component(unit(c), c)


def test_plan_renames_declaration_and_body():
	plan = plan_alias_rename(analyzer_for(sense_component()), RenameInfo(old_name="R", new_name="Sensor"))
	assert plan.status.ok
	assert plan.component == "SenseC"
	assert [(e.line, e.offset) for e in plan.edits] == [(3, 48), (9, 120), (12, 180)]
	assert all(e.old_text == "R" and e.new_text == "Sensor" and e.length == 1 for e in plan.edits)


def test_not_an_alias_is_a_precondition_failure():
	plan = plan_alias_rename(analyzer_for(sense_component()), RenameInfo(old_name="Leds", new_name="L"))
	assert not plan.status.ok
	assert "not an interface alias" in plan.status.errors[0]
	assert plan.edits == []


def test_invalid_and_colliding_names():
	analyzer = analyzer_for(sense_component())
	assert not check_alias_rename(analyzer, RenameInfo(old_name="R", new_name="2bad")).ok
	assert not check_alias_rename(analyzer, RenameInfo(old_name="R", new_name="command")).ok
	assert not check_alias_rename(analyzer, RenameInfo(old_name="R", new_name="R")).ok
	# Leds is used without an alias, so its name is taken
	assert not check_alias_rename(analyzer, RenameInfo(old_name="R", new_name="Leds")).ok


def test_renaming_back_to_interface_name_warns():
	status = check_alias_rename(analyzer_for(sense_component()), RenameInfo(old_name="R", new_name="Read"))
	assert status.ok
	assert any("redundant" in w for w in status.warnings)


def test_interface_names_are_never_edited():
	read = ident("R", offset=10)
	c = component("Odd", provides(iface(read)), uses(iface("Get", ident("R", offset=30))))
	plan = plan_alias_rename(analyzer_for(c), RenameInfo(old_name="R", new_name="G"))
	assert [e.offset for e in plan.edits] == [30]


def test_without_component_only_declarations():
	c = sense_component()
	analyzer = ComponentAstAnalyzer(None, c.name, c.specification)
	plan = plan_alias_rename(analyzer, RenameInfo(old_name="R", new_name="Sensor"))
	assert [e.offset for e in plan.edits] == [48]
	assert plan.status.warnings


def test_renaming_to_component_name_warns():
	c = component("L", provides(iface("Read", "R")))
	status = check_alias_rename(analyzer_for(c), RenameInfo(old_name="R", new_name="L"))
	assert status.ok
	assert any("name of component L" in w for w in status.warnings)
