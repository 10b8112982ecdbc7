import json

import pytest
from typer.testing import CliRunner

from filetree.cli import app

runner = CliRunner()

DOCUMENT = """
- name: src
  isFolder: true
  children:
    - name: a.js
    - name: lib
      isFolder: true
      children:
        - name: b.js
- name: README.md
"""


@pytest.fixture
def document(tmp_path):
    doc = tmp_path / "tree.yaml"
    doc.write_text(DOCUMENT)
    return doc


def invoke(tmp_path, *args):
    return runner.invoke(app, ["--logfile", str(tmp_path / "log.txt"), *[str(a) for a in args]])


def test_help():
    """Test the help command displays usage information."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_files(tmp_path, document):
    result = invoke(tmp_path, "files", document)
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["src/a.js", "src/lib/b.js", "README.md"]


def test_paths(tmp_path, document):
    result = invoke(tmp_path, "paths", document)
    assert result.exit_code == 0, result.output
    tree = json.loads(result.stdout)
    assert tree[0]["children"][1]["children"][0]["path"] == "src/lib/b.js"


def test_resolve(tmp_path, document):
    result = invoke(tmp_path, "resolve", document, "src/lib")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"index": 1, "name": "lib", "path": "src/lib", "isFolder": True}


def test_resolve_missing(tmp_path, document):
    result = invoke(tmp_path, "resolve", document, "src/missing.js")
    assert result.exit_code == 1
    assert "Nothing found" in result.output


def test_resolve_through_file(tmp_path, document):
    result = invoke(tmp_path, "resolve", document, "README.md/x")
    assert result.exit_code == 1
    assert "not a folder" in result.output


def test_remove(tmp_path, document):
    result = invoke(tmp_path, "remove", document, "src/a.js")
    assert result.exit_code == 0, result.output
    tree = json.loads(result.stdout)
    assert [n["name"] for n in tree[0]["children"]] == ["lib"]
    assert document.read_text() == DOCUMENT


def test_remove_missing(tmp_path, document):
    result = invoke(tmp_path, "remove", document, "src/missing.js")
    assert result.exit_code == 1
    assert "missing.js" in result.output


def test_exists(tmp_path, document):
    result = invoke(tmp_path, "exists", document, "src", "lib")
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"exists": True}
    result = invoke(tmp_path, "exists", document, "src", "missing.js")
    assert json.loads(result.stdout) == {"exists": False}


def test_exists_on_file(tmp_path, document):
    result = invoke(tmp_path, "exists", document, "README.md", "x")
    assert result.exit_code == 1


def test_bad_document(tmp_path):
    doc = tmp_path / "bad.yaml"
    doc.write_text("- isFolder: true\n")
    result = invoke(tmp_path, "files", doc)
    assert result.exit_code == 1
    assert "Failed to load" in result.output


def test_missing_document(tmp_path):
    result = invoke(tmp_path, "files", tmp_path / "nope.yaml")
    assert result.exit_code == 1


def test_operations_are_logged(tmp_path, document):
    result = invoke(tmp_path, "--loglevel", "DEBUG", "remove", document, "src/a.js")
    assert result.exit_code == 0, result.output
    assert "Removed 'src/a.js'" in (tmp_path / "log.txt").read_text()


def test_unknown_loglevel_is_rejected(tmp_path, document):
    result = invoke(tmp_path, "--loglevel", "bogus", "files", document)
    assert result.exit_code == 2
