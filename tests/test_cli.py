import json

import pytest

import diagramatics.__main__ as cli
from diagramatics import GeometryError


def test_main_prints_outline_and_bbox(capsys):
    cli.main(["--scene", "labels"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("diagram children=6")
    assert lines[-1].startswith("bbox (")


def test_main_filters_by_tag(capsys):
    cli.main(["--scene", "arrows", "--tag", "arrow-head"])

    lines = capsys.readouterr().out.splitlines()
    nodes, bbox = lines[:-1], lines[-1]
    assert len(nodes) == 4
    assert all("#arrow-head" in line for line in nodes)
    assert bbox.startswith("bbox")


def test_main_flattens(capsys):
    cli.main(["--scene", "locator", "--flatten"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("diagram children=13")
    assert all(line.startswith("  ") for line in lines[1:-1])


def test_main_dumps_json(capsys):
    cli.main(["--scene", "locator", "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data["kind"] == "diagram"
    assert len(data["children"]) == 3


def test_main_exits_on_geometry_error(monkeypatch):
    def _broken():
        raise GeometryError("no")

    monkeypatch.setitem(cli.SCENES, "labels", _broken)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--scene", "labels"])
    assert excinfo.value.code == 1
