from __future__ import annotations

from pathlib import Path

import pytest

from tcpgen import main as cli
from tcpgen.random_util import seeded_random
from tcpgen.tests.conftest import lines, write_tree


def _scripted(answers):
    it = iter(answers)

    def _input(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


@pytest.mark.parametrize("raw,expected", [
    ("3", 3),
    (" 12 \n", 12),
    ("0", 0),
    ("-4", 0),
    ("three", 0),
    ("", 0),
    ("2.5", 0),
    ("+3", 3),
    ("1_000", 0),
    ("３", 0),
    ("+", 0),
])
def test_parse_count(raw, expected):
    assert cli.parse_count(raw) == expected


def test_session_prints_requested_descriptors(catalog):
    out: list[str] = []
    printed = cli.run_session(catalog, seeded_random(5), input_func=_scripted(["2", "1", "0", "5"]), output_func=out.append)
    assert printed == 3
    assert out[0] == "Welcome to the TCP random generator, there are 15 types"
    assert out[1] == "Please input how many you want to generate, 0 to exit"
    assert out.count("Would you like more TCPs? Input how many if so, 0 to exit") == 2


def test_session_ends_on_garbage_and_eof(catalog):
    out: list[str] = []
    assert cli.run_session(catalog, seeded_random(5), input_func=_scripted(["lots"]), output_func=out.append) == 0
    assert cli.run_session(catalog, seeded_random(5), input_func=_scripted([]), output_func=out.append) == 0


def test_session_reports_unknown_items(tmp_path: Path):
    from tcpgen.generator import load_catalog

    catalog = load_catalog(write_tree(tmp_path, {"types/a.txt": lines("Loose", "#food", "Apple")}))
    out: list[str] = []
    cli.run_session(catalog, seeded_random(1), input_func=_scripted(["0"]), output_func=out.append)
    assert out[0] == "1 types with an unknown category"
    assert out[1] == "Welcome to the TCP random generator, there are 2 types"


def test_main_count_mode(catalog_root: Path, capsys):
    assert cli.main(["--root", str(catalog_root), "--count", "4"]) == 0
    printed = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(printed) == 4


def test_main_reports_unloadable_catalog(tmp_path: Path):
    assert cli.main(["--root", str(tmp_path / "missing"), "--count", "1"]) == 1
