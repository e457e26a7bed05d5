"""Tests for workspace configuration loading."""

import logging
import os
from pathlib import Path
from textwrap import dedent

import pytest

from gopath_vendor.settings import DEFAULT_GOROOT
from gopath_vendor.settings import AppSettings
from gopath_vendor.settings import SettingsPaths
from gopath_vendor.settings import load_context
from gopath_vendor.settings import split_path_list


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No Go environment variables, HOME and cwd inside tmp_path."""
    monkeypatch.delenv("GOPATH", raising=False)
    monkeypatch.delenv("GOROOT", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("gopath_vendor.settings.shutil.which", lambda name: None)
    return home


@pytest.fixture
def settings_files(tmp_path):
    paths = SettingsPaths(
        global_settings=tmp_path / "global" / "settings.yaml",
        project_settings=tmp_path / "project" / "settings.yaml",
    )
    paths.global_settings.parent.mkdir()
    paths.project_settings.parent.mkdir()
    return paths


def test_split_path_list_drops_empty_entries():
    value = os.pathsep.join(["/a", "", "/b", ""])
    assert split_path_list(value) == ["/a", "/b"]


def test_environment_gopath(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("GOPATH", os.pathsep.join([str(tmp_path / "one"), str(tmp_path / "two")]))
    monkeypatch.setenv("GOROOT", str(tmp_path / "go"))

    ctx = load_context()

    assert ctx.gopath_list == (tmp_path / "one" / "src", tmp_path / "two" / "src")
    assert ctx.goroot == tmp_path / "go" / "src"


def test_explicit_values_override_environment(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("GOPATH", str(tmp_path / "env"))
    monkeypatch.setenv("GOROOT", str(tmp_path / "envroot"))

    ctx = load_context(gopath=[str(tmp_path / "cli")], goroot=str(tmp_path / "cliroot"))

    assert ctx.gopath_list == (tmp_path / "cli" / "src",)
    assert ctx.goroot == tmp_path / "cliroot" / "src"


def test_defaults(clean_env):
    ctx = load_context()

    assert ctx.gopath_list == (clean_env / "go" / "src",)
    assert ctx.goroot == DEFAULT_GOROOT / "src"


def test_goroot_from_go_binary(clean_env, monkeypatch, tmp_path):
    go = tmp_path / "sdk" / "bin" / "go"
    go.parent.mkdir(parents=True)
    go.write_text("")
    monkeypatch.setattr("gopath_vendor.settings.shutil.which", lambda name: str(go))

    assert load_context().goroot == go.resolve().parent.parent / "src"


def test_settings_files_used_without_environment(clean_env, settings_files, tmp_path):
    settings_files.global_settings.write_text(
        dedent(f"""
        workspace:
          gopath:
            - {tmp_path / "g1"}
          goroot: {tmp_path / "sdk"}
        """)
    )

    ctx = load_context(settings=AppSettings(settings_files))

    assert ctx.gopath_list == (tmp_path / "g1" / "src",)
    assert ctx.goroot == tmp_path / "sdk" / "src"


def test_project_settings_override_global(settings_files, tmp_path):
    settings_files.global_settings.write_text(
        dedent("""
        workspace:
          gopath: [/global/go]
          goroot: /global/sdk
        logging:
          level: DEBUG
        """)
    )
    settings_files.project_settings.write_text(
        dedent("""
        workspace:
          gopath: [/project/go]
        """)
    )

    settings = AppSettings(settings_files)

    assert settings.get_gopath() == ["/project/go"]
    assert settings.get_goroot() == "/global/sdk"
    assert settings.get_logging() == {"level": "DEBUG"}


def test_gopath_setting_as_path_list(settings_files):
    settings_files.global_settings.write_text(f"workspace:\n  gopath: '/a{os.pathsep}/b'\n")
    assert AppSettings(settings_files).get_gopath() == ["/a", "/b"]


def test_malformed_settings_are_skipped(settings_files):
    settings_files.global_settings.write_text("workspace: [unclosed")
    settings_files.project_settings.write_text("workspace:\n  goroot: /sdk\n")

    assert AppSettings(settings_files).get_goroot() == "/sdk"


def test_non_mapping_settings_are_skipped(settings_files):
    settings_files.global_settings.write_text("- just\n- a list\n")
    assert AppSettings(settings_files).get_merged_settings() == {}


def test_missing_settings_files(settings_files):
    settings = AppSettings(settings_files)
    assert settings.get_gopath() == []
    assert settings.get_goroot() is None
    assert settings.get_logging() == {}


def test_default_paths(clean_env, tmp_path):
    paths = SettingsPaths.default()
    assert paths.global_settings == clean_env / ".gopath-vendor" / "settings.yaml"
    assert paths.project_settings == Path.cwd() / ".gopath-vendor" / "settings.yaml"


def test_settings_are_parsed_once(settings_files, caplog):
    settings_files.global_settings.write_text("workspace: [unclosed")
    settings = AppSettings(settings_files)

    with caplog.at_level(logging.WARNING, logger="gopath_vendor.settings"):
        settings.get_gopath()
        settings.get_goroot()
        settings.get_logging()

    warnings = [r for r in caplog.records if "Skipping unreadable settings file" in r.getMessage()]
    assert len(warnings) == 1
