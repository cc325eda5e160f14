import os

import pytest

from friendcore.config import config


def _forget(monkeypatch, key):
    """Make sure ``key`` is absent now and after the test, even if a .env file sets it."""
    monkeypatch.setenv(key, "unused")
    monkeypatch.delenv(key)


def test_reads_value_from_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _forget(monkeypatch, "FRIENDCORE_TEST_HOST")
    (tmp_path / ".env").write_text("FRIENDCORE_TEST_HOST=localhost\n")
    assert config("FRIENDCORE_TEST_HOST") == "localhost"


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FRIENDCORE_TEST_NAME", "from-environment")
    (tmp_path / ".env").write_text("FRIENDCORE_TEST_NAME=from-file\n")
    assert config("FRIENDCORE_TEST_NAME") == "from-environment"


def test_missing_env_file_prints_notice_and_uses_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FRIENDCORE_TEST_PORT", "5432")
    assert config("FRIENDCORE_TEST_PORT") == "5432"
    assert capsys.readouterr().out == "Error loading .env file"


def test_unknown_key_gives_empty_string(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _forget(monkeypatch, "FRIENDCORE_TEST_ABSENT")
    (tmp_path / ".env").write_text("OTHER_KEY=1\n")
    _forget(monkeypatch, "OTHER_KEY")
    assert config("FRIENDCORE_TEST_ABSENT") == ""


def test_no_notice_when_file_present(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _forget(monkeypatch, "FRIENDCORE_TEST_SECRET")
    secret = "secret"
    (tmp_path / ".env").write_text(f"FRIENDCORE_TEST_SECRET={secret}\n")
    assert config("FRIENDCORE_TEST_SECRET") == secret
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("key", ["FRIENDCORE_A", "FRIENDCORE_B"])
def test_loaded_values_land_in_environment(tmp_path, monkeypatch, key):
    monkeypatch.chdir(tmp_path)
    _forget(monkeypatch, key)
    (tmp_path / ".env").write_text(f"{key}=value-{key}\n")
    config(key)
    assert os.environ[key] == f"value-{key}"