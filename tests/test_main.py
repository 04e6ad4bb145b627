from __future__ import annotations

import types

import pytest

from config import env_capacity, get_settings_module
from student_attendance import main as main_module
from student_attendance.container import build_container
from student_attendance.roster.binary_repository import BinaryFileRosterRepository


@pytest.mark.parametrize(
    "env, module",
    [("production", "config.production"), ("test", "config.testing"), ("whatever", "config.development")],
)
def test_settings_module_from_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_build_container_uses_settings(tmp_path):
    settings = types.SimpleNamespace(DATA_FILE=str(tmp_path / "x.dat"), MAX_STUDENTS=3)
    container = build_container(settings=settings)

    assert isinstance(container.repository, BinaryFileRosterRepository)
    assert container.repository.path == tmp_path / "x.dat"
    assert container.roster.capacity == 3


def test_open_roster_saves_on_normal_exit(monkeypatch, tmp_path):
    monkeypatch.setattr(main_module, "configure_logging", lambda level: None)
    monkeypatch.setattr(main_module, "load_settings", lambda settings_module=None: _settings(tmp_path))

    with main_module.open_roster() as container:
        container.roster.add_record(1, "Amit")
        container.roster.mark_attendance(1, 1, True)

    with main_module.open_roster() as container:
        assert [r.name for r in container.roster.list_all()] == ["Amit"]
        assert container.roster.find_by_roll_number(1).is_present(0)


def test_open_roster_skips_save_on_error(monkeypatch, tmp_path):
    monkeypatch.setattr(main_module, "configure_logging", lambda level: None)
    monkeypatch.setattr(main_module, "load_settings", lambda settings_module=None: _settings(tmp_path))

    with pytest.raises(RuntimeError):
        with main_module.open_roster() as container:
            container.roster.add_record(1, "Amit")
            raise RuntimeError("boom")

    assert not (tmp_path / "students.dat").exists()


def _settings(tmp_path):
    return types.SimpleNamespace(
        __name__="config.testing",
        DATA_FILE=str(tmp_path / "students.dat"),
        MAX_STUDENTS=100,
        LOG_LEVEL="INFO",
        DEBUG=True,
    )


@pytest.mark.parametrize("raw, expected", [("40", 40), ("", None), ("None", None), (" unlimited ", None)])
def test_env_capacity(monkeypatch, raw, expected):
    monkeypatch.setenv("MAX_STUDENTS", raw)
    assert env_capacity("MAX_STUDENTS", 100) == expected


def test_env_capacity_default(monkeypatch):
    monkeypatch.delenv("MAX_STUDENTS", raising=False)
    assert env_capacity("MAX_STUDENTS", 100) == 100


def test_build_container_without_cap(tmp_path):
    settings = types.SimpleNamespace(DATA_FILE=str(tmp_path / "x.dat"), MAX_STUDENTS=None)
    roster = build_container(settings=settings).roster

    for roll in range(1, 121):
        roster.add_record(roll, "Student")
    assert roster.capacity is None
    assert len(roster) == 120
