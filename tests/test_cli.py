import json

import pytest

from builders import component, iface, provides, unit, uses
from cli import main


@pytest.fixture
def ast_path(tmp_path):
	c = component("BlinkC", uses(iface("Boot"), iface("Timer", "Timer0")), provides(iface("Init")))
	p = tmp_path / "blink.json"
	p.write_text(json.dumps(unit(c, file="BlinkC.nc").model_dump(mode="json")))
	return str(p)


def test_analyze(ast_path, capsys):
	main(["analyze", ast_path])
	out = json.loads(capsys.readouterr().out)
	assert out["facts"]["components"][0]["interfaces"] == ["Boot", "Timer", "Init"]


def test_resolve(ast_path, capsys):
	main(["resolve", ast_path, "Timer0", "--component", "BlinkC"])
	out = json.loads(capsys.readouterr().out)
	assert out["interface"] == "Timer"


def test_rename_rejected_exits_nonzero(ast_path, capsys):
	with pytest.raises(SystemExit) as exc:
		main(["rename", ast_path, "Boot", "Booted"])
	assert exc.value.code == 2
	assert json.loads(capsys.readouterr().out)["status"]["errors"]


def test_unknown_component(ast_path):
	with pytest.raises(SystemExit) as exc:
		main(["resolve", ast_path, "Timer0", "--component", "Nope"])
	assert exc.value.code == 1


def test_malformed_file(tmp_path):
	p = tmp_path / "bad.json"
	p.write_text('{"declarations": [{"kind": "nope"}]}')
	with pytest.raises(SystemExit) as exc:
		main(["analyze", str(p)])
	assert exc.value.code == 1


def test_non_utf8_file(tmp_path):
	p = tmp_path / "latin.json"
	p.write_bytes(b'{"declarations": [], "file": "\xff\xfe"}')
	with pytest.raises(SystemExit) as exc:
		main(["analyze", str(p)])
	assert exc.value.code == 1
