from __future__ import annotations

import errno
import json
import logging
from pathlib import Path

import pytest

from extract_mongo_schema import exporters
from extract_mongo_schema.config import DATA_MARKER, TEMPLATE_PATH
from extract_mongo_schema.errors import TemplateReadFailure, WriteFailure


@pytest.fixture()
def sample_schema() -> dict:
    return {
        "users": {
            "_id": {"type": "string", "required": True},
            "name": {"type": "string", "required": False},
            "città": {"type": "string", "required": False},
        },
        "posts": {
            "_id": {"type": "string", "required": True},
            "authorId": {"type": "string", "required": True, "foreignKey": True, "references": "users"},
            "tags": {"type": "Array", "required": False},
        },
    }


def test_serialize_uses_tabs_and_keeps_order(sample_schema: dict) -> None:
    text = exporters.serialize_schema(sample_schema)
    lines = text.splitlines()
    assert lines[1] == '\t"users": {'
    assert lines[2] == '\t\t"_id": {'
    assert text.index('"users"') < text.index('"posts"')
    assert "città" in text


def test_serialize_falls_back_to_str() -> None:
    class ObjectId:
        def __str__(self) -> str:
            return "65a1f0c2e4b0"

    assert exporters.serialize_schema({"sample": ObjectId()}) == '{\n\t"sample": "65a1f0c2e4b0"\n}'


def test_json_export_round_trip(tmp_path: Path, sample_schema: dict) -> None:
    output = tmp_path / "schema.json"
    output.write_text("stale content that is longer than nothing", encoding="utf-8")

    written = exporters.render_output(sample_schema, output_format="json", output_path=output)

    assert written == output
    assert json.loads(output.read_text(encoding="utf-8")) == sample_schema


def test_html_diagram_export(tmp_path: Path, sample_schema: dict) -> None:
    output = tmp_path / "schema.html"
    written = exporters.render_output(sample_schema, output_format="html-diagram", output_path=output)

    template = TEMPLATE_PATH.read_text(encoding="utf-8")
    before, after = template.split(DATA_MARKER, 1)
    content = written.read_text(encoding="utf-8")

    assert content == before + exporters.serialize_schema(sample_schema) + after
    assert DATA_MARKER not in content


def test_html_diagram_custom_template(tmp_path: Path) -> None:
    template = tmp_path / "template.html"
    template.write_text("<script>var s = " + DATA_MARKER + "; // $1 $&</script>", encoding="utf-8")
    output = tmp_path / "out.html"

    exporters.render_output({"a": 1}, output_format="html-diagram", output_path=output, template_path=template)

    assert output.read_text(encoding="utf-8") == '<script>var s = {\n\t"a": 1\n}; // $1 $&</script>'


def test_render_html_diagram_replaces_first_marker_only() -> None:
    rendered = exporters.render_html_diagram(f"{DATA_MARKER}|{DATA_MARKER}", {"x": "$'"})
    assert rendered == '{\n\t"x": "$\'"\n}|' + DATA_MARKER


def test_missing_template(tmp_path: Path) -> None:
    output = tmp_path / "out.html"
    missing = tmp_path / "nope.html"
    with pytest.raises(TemplateReadFailure) as excinfo:
        exporters.render_output({}, output_format="html-diagram", output_path=output, template_path=missing)
    assert str(missing) in excinfo.value.message
    assert not output.exists()


def test_write_failure_reports_path(tmp_path: Path) -> None:
    output = tmp_path / "missing-dir" / "schema.json"
    with pytest.raises(WriteFailure) as excinfo:
        exporters.render_output({}, output_format="json", output_path=output)
    assert str(output) in excinfo.value.message
    assert excinfo.value.reason


def test_unknown_format_writes_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    output = tmp_path / "schema.yaml"
    with caplog.at_level(logging.WARNING, logger="extract_mongo_schema"):
        written = exporters.render_output({"a": 1}, output_format="yaml", output_path=output)
    assert written is None
    assert not output.exists()
    assert "yaml" in caplog.text


def test_packaged_template_has_marker() -> None:
    assert TEMPLATE_PATH.read_text(encoding="utf-8").count(DATA_MARKER) == 1


def test_failed_write_keeps_existing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    output = tmp_path / "schema.json"
    output.write_text("previous", encoding="utf-8")

    def no_space(self, target):
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(Path, "replace", no_space)
    with pytest.raises(WriteFailure) as excinfo:
        exporters.render_output({"a": 1}, output_format="json", output_path=output)

    assert excinfo.value.reason == "No space left on device"
    assert output.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["schema.json"]
