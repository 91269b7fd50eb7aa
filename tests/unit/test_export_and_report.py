import json
from pathlib import Path

import pandas as pd

from application import (
    build_term_report,
    dump_mesh_tree_json,
    locations_frame,
    mesh_tree_payload,
    write_locations_table,
    write_term_report,
)
from domain.mesh import MeshTree, build_mesh_tree


def _mesh() -> MeshTree:
    return build_mesh_tree(["A;1", "B;1.1", "C;1.1.1", "B;2"])


def test_payload_exposes_tree_and_locations() -> None:
    payload = mesh_tree_payload(_mesh())

    a = payload["tree"]["1"]
    assert a["reference"] == {"heading": "A", "path": ["1"]}
    assert a["children"]["1"]["children"]["1"]["reference"]["heading"] == "C"
    assert payload["locations"]["b"] == [["1", "1"], ["2"]]


def test_dump_json_round_trips_through_json_module(tmp_path: Path) -> None:
    out = dump_mesh_tree_json(_mesh(), tmp_path / "out" / "tree.json")

    data = json.loads(out.read_text(encoding="utf-8"))
    assert set(data) == {"tree", "locations", "meta"}
    assert data["meta"]["n_headings"] == 3
    assert data["meta"]["n_nodes"] == 4
    assert {"source", "source_tag", "command"} <= set(data["meta"])
    assert data["tree"]["2"]["reference"]["heading"] == "B"


def test_locations_frame_has_one_row_per_location() -> None:
    df = locations_frame(_mesh())

    assert list(df.columns) == ["heading", "tree_number", "depth"]
    assert df.values.tolist() == [
        ["a", "1", 1],
        ["b", "1.1", 2],
        ["b", "2", 1],
        ["c", "1.1.1", 3],
    ]


def test_write_locations_table(tmp_path: Path) -> None:
    path = write_locations_table(_mesh(), tmp_path / "locations.csv")

    df = pd.read_csv(path, dtype={"tree_number": str})
    assert len(df) == 4
    assert df["tree_number"].tolist()[1] == "1.1"


def test_term_report_rows() -> None:
    df = build_term_report(_mesh(), ["C", "b", "missing"])

    c, b, missing = df.to_dict(orient="records")
    assert c == {
        "term": "C",
        "found": True,
        "depth": 3,
        "n_locations": 1,
        "tree_numbers": ["1.1.1"],
        "parents": ["B"],
        "n_exploded": 1,
    }
    assert b["tree_numbers"] == ["1.1", "2"]
    assert b["n_exploded"] == 3
    assert not missing["found"]
    assert missing["depth"] == 0
    assert missing["parents"] == []


def test_write_term_report_joins_lists(tmp_path: Path) -> None:
    df = build_term_report(_mesh(), ["b"])
    path = write_term_report(df, tmp_path / "report.csv")

    out = pd.read_csv(path, dtype=str, keep_default_na=False)
    assert out.loc[0, "tree_numbers"] == "1.1|2"
    assert out.loc[0, "parents"] == ""
