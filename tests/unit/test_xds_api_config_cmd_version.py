"""Unit tests for xds.api.config.cmd_version module."""

import subprocess

import pytest

from xds.api.config import cmd_version

pytestmark = pytest.mark.config


def test_cmd_version_with_git_sha(monkeypatch, run_cmd):
    monkeypatch.setattr("xds.api.config.cmd_version.get_package_version", lambda: "0.6.0")
    monkeypatch.setattr("xds.api.config.cmd_version.get_git_sha", lambda: "abc1234")

    result = run_cmd(cmd_version.cmd_version)
    assert result.success is True
    assert result.output["version"] == "0.6.0"
    assert result.output["api_version"] == "1"
    assert result.output["git_sha"] == "abc1234"
    assert result.output["full_version"] == "0.6.0 (abc1234)"
    assert result.output["errors"] == []


def test_cmd_version_without_git_sha(monkeypatch, run_cmd):
    monkeypatch.setattr("xds.api.config.cmd_version.get_package_version", lambda: "0.6.0")
    monkeypatch.setattr("xds.api.config.cmd_version.get_git_sha", lambda: "")

    result = run_cmd(cmd_version.cmd_version)
    assert result.success is True
    assert result.output["full_version"] == "0.6.0"


def test_get_git_sha_outside_checkout(monkeypatch):
    def fail(*args, **kwargs):
        raise subprocess.CalledProcessError(128, args[0])

    monkeypatch.setattr("xds.api.config.cmd_version.subprocess.check_output", fail)
    assert cmd_version.get_git_sha() == ""


def test_get_git_sha_without_git(monkeypatch):
    def fail(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr("xds.api.config.cmd_version.subprocess.check_output", fail)
    assert cmd_version.get_git_sha() == ""
