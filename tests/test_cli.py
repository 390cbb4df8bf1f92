"""
Tests for the hover command-line script.
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "cmd" / "hover.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("hover_cli", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def dockerfile(tmp_path):
    path = tmp_path / "Dockerfile"
    path.write_bytes(b"ARG v=1.0\r\nFROM node:$v\r\nUSER ${v}\r\n")
    return str(path)


class TestHoverCommand:

    def test_keyword(self, cli, dockerfile, capsys):
        assert cli.main([dockerfile, "1:2"]) == 0
        assert "base image" in capsys.readouterr().out

    def test_variable_json(self, cli, dockerfile, capsys):
        assert cli.main(["--json", dockerfile, "2:7"]) == 0
        assert json.loads(capsys.readouterr().out) == {"contents": "1.0"}

    def test_nothing(self, cli, dockerfile, capsys):
        assert cli.main([dockerfile, "0:8"]) == 0
        assert capsys.readouterr().out == ""

    def test_nothing_json(self, cli, dockerfile, capsys):
        assert cli.main(["--json", dockerfile, "9:0"]) == 0
        assert json.loads(capsys.readouterr().out) is None

    def test_docs_override(self, cli, dockerfile, tmp_path, capsys):
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "USER.md").write_text("who runs it")
        assert cli.main(["--docs", str(docs), dockerfile, "2:1"]) == 0
        assert capsys.readouterr().out == "who runs it\n"

    def test_missing_file(self, cli, tmp_path):
        assert cli.main([str(tmp_path / "nope"), "0:0"]) == 1

    def test_bad_position(self, cli, dockerfile):
        with pytest.raises(SystemExit) as x:
            cli.main([dockerfile, "zero"])
        assert x.value.code == 2
