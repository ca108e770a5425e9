from __future__ import annotations

import json
from pathlib import Path

import yaml

from rcli.formats import OutputFormat
from rcli.process.csv_convert import process_csv, read_records

CSV_TEXT = "Name,Position,Nationality\nNovak,Forward,Serbia\nRoger,Midfield,Switzerland\n"


def test_read_records_with_header():
    records = read_records(CSV_TEXT.splitlines())
    assert records == [
        {"Name": "Novak", "Position": "Forward", "Nationality": "Serbia"},
        {"Name": "Roger", "Position": "Midfield", "Nationality": "Switzerland"},
    ]


def test_read_records_without_header_and_custom_delimiter():
    records = read_records(["a;b", "c;d"], delimiter=";", header=False)
    assert records == [["a", "b"], ["c", "d"]]


def test_read_records_empty_input():
    assert read_records([]) == []


def test_process_csv_writes_json(tmp_path: Path):
    source = tmp_path / "players.csv"
    source.write_text(CSV_TEXT, encoding="utf-8")
    target = process_csv(str(source), str(tmp_path / "out.json"))
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data[1]["Name"] == "Roger"


def test_process_csv_writes_yaml_with_default_name(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "players.csv"
    source.write_text(CSV_TEXT, encoding="utf-8")
    target = process_csv(str(source), format=OutputFormat.YAML)
    assert target == Path("output.yaml")
    data = yaml.safe_load((tmp_path / "output.yaml").read_text(encoding="utf-8"))
    assert data[0] == {"Name": "Novak", "Position": "Forward", "Nationality": "Serbia"}
