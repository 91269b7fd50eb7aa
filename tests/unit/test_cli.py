import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

import main
from infrastructure.constants import ENV_ENCODING, ENV_TREE_FILE


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(ENV_TREE_FILE, raising=False)
    monkeypatch.delenv(ENV_ENCODING, raising=False)
    # main() reconfigures the root logger; restore it for the next test
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _write_tree(tmp_path: Path, text: str = "A;1\nB;1.1\nC;1.1.1\n") -> Path:
    path = tmp_path / "mtrees.bin"
    path.write_text(text, encoding="utf-8")
    return path


def _run(tmp_path: Path, *args: str) -> int:
    base = ["--config", str(tmp_path / "none.yaml"), "--env", str(tmp_path / "none.env")]
    return main.main([*base, *args])


def test_depth_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write_tree(tmp_path)

    assert _run(tmp_path, "--tree-file", str(tree), "depth", "c") == 0
    assert json.loads(capsys.readouterr().out) == 3


def test_parents_and_reference_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write_tree(tmp_path)

    _run(tmp_path, "--tree-file", str(tree), "parents", "C")
    assert json.loads(capsys.readouterr().out) == ["B"]

    _run(tmp_path, "--tree-file", str(tree), "reference", "b")
    assert json.loads(capsys.readouterr().out) == [{"heading": "b", "path": ["1", "1"]}]


def test_default_tree_is_used_without_tree_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "contains", "Herpes Zoster") == 0
    assert json.loads(capsys.readouterr().out) is True


def test_tree_file_from_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_tree(tmp_path)
    config = tmp_path / "meshtree.yaml"
    config.write_text("tree_file: mtrees.bin\n", encoding="utf-8")

    main.main(["--config", str(config), "--env", str(tmp_path / "none.env"), "explode", "B"])
    assert sorted(json.loads(capsys.readouterr().out)) == ["B", "C"]


def test_malformed_tree_file_exits_non_zero(tmp_path: Path) -> None:
    tree = _write_tree(tmp_path, "A;1\nX\n")

    assert _run(tmp_path, "--tree-file", str(tree), "depth", "A") == 1


def test_dump_and_table_commands(tmp_path: Path) -> None:
    tree = _write_tree(tmp_path)

    _run(tmp_path, "--tree-file", str(tree), "dump", str(tmp_path / "tree.json"))
    _run(tmp_path, "--tree-file", str(tree), "table", str(tmp_path / "locations.csv"))

    assert "locations" in json.loads((tmp_path / "tree.json").read_text(encoding="utf-8"))
    assert (tmp_path / "locations.csv").read_text(encoding="utf-8").startswith("heading,tree_number,depth")


def test_report_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    tree = _write_tree(tmp_path)
    terms = tmp_path / "terms.txt"
    terms.write_text("C\n\nmissing\n", encoding="utf-8")

    assert _run(tmp_path, "--tree-file", str(tree), "report", str(terms)) == 0

    records = json.loads(capsys.readouterr().out)
    assert [r["term"] for r in records] == ["C", "missing"]
    assert records[0]["parents"] == ["B"]
    assert records[1]["found"] is False


@pytest.mark.parametrize("text", ["- not\n- a mapping\n", "encoding: not-a-codec\n"])
def test_invalid_config_exits_non_zero(tmp_path: Path, text: str) -> None:
    config = tmp_path / "meshtree.yaml"
    config.write_text(text, encoding="utf-8")

    assert main.main(["--config", str(config), "--env", str(tmp_path / "none.env"), "depth", "A"]) == 1
