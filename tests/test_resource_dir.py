from pathlib import Path

import pytest

from springbox.resource_dir import search_and_set_resource_dir


@pytest.fixture
def work(tmp_path, monkeypatch):
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return work_dir


def _cwd():
    return Path.cwd().resolve()


def test_found_in_working_directory(work):
    (work / "resources").mkdir()
    assert search_and_set_resource_dir("resources", work / "elsewhere") is True
    assert _cwd() == (work / "resources").resolve()


def test_found_in_app_dir(tmp_path, work):
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (app / "resources").resolve()


def test_found_three_levels_above_app_dir(tmp_path, work):
    (tmp_path / "resources").mkdir()
    app = tmp_path / "a" / "b" / "c"
    app.mkdir(parents=True)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (tmp_path / "resources").resolve()


def test_four_levels_above_is_too_far(tmp_path, work):
    (tmp_path / "resources").mkdir()
    app = tmp_path / "a" / "b" / "c" / "d"
    app.mkdir(parents=True)
    assert search_and_set_resource_dir("resources", app) is False
    assert _cwd() == work.resolve()


def test_file_with_same_name_is_ignored(tmp_path, work):
    (work / "resources").write_text("not a directory")
    app = tmp_path / "app"
    app.mkdir()
    assert search_and_set_resource_dir("resources", app) is False
    assert _cwd() == work.resolve()


def test_working_directory_takes_precedence(tmp_path, work):
    (work / "resources").mkdir()
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    assert search_and_set_resource_dir("resources", app) is True
    assert _cwd() == (work / "resources").resolve()