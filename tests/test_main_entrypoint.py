"""Tests for `python -m smrkprobe` entrypoint behavior."""

from __future__ import annotations

import builtins
import sys
import types

import pytest

from smrkprobe import __main__ as smrkprobe_main


def test_main_invokes_cli_app(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, str] = {}
    dummy_cli = types.ModuleType("smrkprobe.cli")

    def _app(*, prog_name: str) -> None:
        called["prog_name"] = prog_name

    dummy_cli.app = _app  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "smrkprobe.cli", dummy_cli)

    smrkprobe_main.main()
    assert called["prog_name"] == "smrkprobe"


def test_main_exits_with_hint_when_cli_dependency_is_missing(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delitem(sys.modules, "smrkprobe.cli", raising=False)
    real_import = builtins.__import__

    def _fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name in {"smrkprobe.cli", "cli"}:
            err = ModuleNotFoundError("No module named 'typer'")
            err.name = "typer"
            raise err
        return real_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", _fake_import)

    with pytest.raises(SystemExit) as exc:
        smrkprobe_main.main()

    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "SMRK Probe CLI dependencies are missing from this environment" in out
    assert "pip install -U smrkprobe" in out


def test_main_reraises_unrelated_missing_module(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delitem(sys.modules, "smrkprobe.cli", raising=False)
    real_import = builtins.__import__

    def _fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name in {"smrkprobe.cli", "cli"}:
            err = ModuleNotFoundError("No module named 'somethingelse'")
            err.name = "somethingelse"
            raise err
        return real_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", _fake_import)

    with pytest.raises(ModuleNotFoundError, match="somethingelse"):
        smrkprobe_main.main()
