from __future__ import annotations

from pathlib import Path

import pytest

from fl_insurance.config import get_settings


def test_settings_resolve_fixed_names_against_base_dir(tmp_path: Path) -> None:
    s = get_settings(tmp_path)
    assert s.data_zip == tmp_path / "FL_insurance.csv.zip"
    assert s.data_entry == "FL_insurance.csv"
    assert s.count_file == tmp_path / "count.txt"
    assert s.tiv2012_file == tmp_path / "tiv2012.txt"
    assert s.most_valuable_file == tmp_path / "most_valuable.txt"
    assert s.top_n == 10


def test_settings_default_to_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert get_settings().count_file == Path.cwd() / "count.txt"
