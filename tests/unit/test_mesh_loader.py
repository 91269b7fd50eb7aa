import io
from pathlib import Path

import pytest

from domain.mesh import FormatError, SourceReadError
from infrastructure.io import load_default_mesh_tree, load_mesh_tree, mesh_tree_from_reader


class _FailingReader:
    """Yields a few lines, then fails like a broken stream."""

    def __init__(self, lines: list[str]) -> None:
        self.lines = lines

    def __iter__(self):
        yield from self.lines
        raise OSError("device went away")


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "mtrees.bin"
    path.write_text("A;1\nB;1.1\nC;1.1.1\n", encoding="utf-8")

    mesh = load_mesh_tree(path)

    assert mesh.depth("c") == 3
    assert mesh.parents("C") == ["B"]


def test_load_from_file_with_crlf(tmp_path: Path) -> None:
    path = tmp_path / "mtrees.bin"
    path.write_bytes(b"A;1\r\nB;1.1\r\n")

    mesh = load_mesh_tree(path)

    assert mesh.locations == {"a": (("1",),), "b": (("1", "1"),)}


def test_load_from_reader() -> None:
    mesh = mesh_tree_from_reader(io.StringIO("A;1\nB;1.1\n"))
    assert mesh.contains("a")
    assert mesh.explode("a") == ["A", "B"]


def test_missing_file_is_a_source_read_error(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError) as excinfo:
        load_mesh_tree(tmp_path / "missing.bin")

    assert excinfo.value.source.endswith("missing.bin")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_read_failure_aborts_the_build() -> None:
    with pytest.raises(SourceReadError) as excinfo:
        mesh_tree_from_reader(_FailingReader(["A;1\n"]), source="flaky")

    assert excinfo.value.source == "flaky"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_decode_failure_is_a_source_read_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.bin"
    path.write_bytes("Café;1\n".encode("latin-1"))

    with pytest.raises(SourceReadError):
        load_mesh_tree(path, encoding="utf-8")

    assert load_mesh_tree(path, encoding="latin-1").contains("café")


def test_format_error_propagates_from_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.bin"
    path.write_text("A;1\nX\n", encoding="utf-8")

    with pytest.raises(FormatError):
        load_mesh_tree(path)


def test_default_tree_is_loaded_once() -> None:
    assert load_default_mesh_tree() is load_default_mesh_tree()


def test_default_tree_cannot_be_altered_by_callers() -> None:
    first = load_default_mesh_tree()

    with pytest.raises(AttributeError):
        first.locations.pop("herpes zoster")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        first.tree["C01"].children.clear()  # type: ignore[attr-defined]

    again = load_default_mesh_tree()
    assert again.contains("Herpes Zoster")
    assert "Neuralgia, Postherpetic" in again.explode("Infections")
