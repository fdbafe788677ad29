# ==============================================
# Tests for the Command Line Interface
# ==============================================

import json

import pytest

from graphnorm.cli import graph_stats, main


@pytest.fixture
def records_file(tmp_path):
    records = [
        {
            "@rid": "#12:0",
            "@version": 2,
            "name": "alice",
            "out_follows": ["#12:1"],
            "pet": {"@rid": "#13:4", "name": "rex"},
        },
        {"@rid": "#-1:0", "name": "pending"},
    ]
    path = tmp_path / "records.json"
    path.write_text(json.dumps(records))
    return path


class TestCli:
    def test_normalize(self, records_file, capsys):
        assert main(["normalize", str(records_file)]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out[0]["id"] == "#12:0"
        assert out[0]["pet"] == {"id": "#13:4", "name": "rex"}
        assert out[1] == {"name": "pending"}

    def test_normalize_clean(self, records_file, capsys):
        assert main(["normalize", str(records_file), "--clean"]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out[0] == {"id": "#12:0", "name": "alice", "pet": {"id": "#13:4", "name": "rex"}}

    def test_normalize_keeps_schema_edges(self, records_file, tmp_path, capsys):
        schema_file = tmp_path / "schema.json"
        schema_file.write_text(json.dumps({"out_follows": {"collection": "user"}}))

        assert main(["normalize", str(records_file), "--clean", "--schema", str(schema_file)]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out[0]["out_follows"] == ["#12:1"]

    def test_save_and_show(self, records_file, capsys):
        assert main(["normalize", str(records_file), "--save", "run1"]) == 0
        capsys.readouterr()

        assert main(["show", "run1"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out[0]["id"] == "#12:0"

    def test_stats(self, records_file, capsys):
        assert main(["stats", str(records_file)]) == 0
        out = capsys.readouterr().out
        assert "objects: 3" in out
        assert "arrays: 2" in out

    def test_missing_input(self, tmp_path, capsys):
        assert main(["normalize", str(tmp_path / "missing.json")]) == 2
        assert "error:" in capsys.readouterr().err

    def test_missing_snapshot(self, capsys):
        assert main(["show", "nope"]) == 2


class TestGraphStats:
    def test_counts_repeated_references(self):
        node = {"a": 1, "items": [2, 3]}
        node["self"] = node
        assert graph_stats(node) == {"objects": 1, "arrays": 1, "leaves": 3, "repeated_references": 1}
