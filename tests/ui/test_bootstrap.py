"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging

import pytest

from chessgrid import app
from chessgrid.ui import bootstrap


def test_configure_logging_passes_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    bootstrap.configure_logging("debug")
    bootstrap.configure_logging("bogus")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.WARNING


def test_main_builds_settings_and_exits_with_app_code(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen: dict[str, object] = {}

    def fake_run(settings, argv):
        seen["settings"] = settings
        seen["argv"] = argv
        return 3

    monkeypatch.setattr(bootstrap, "run_application", fake_run)
    monkeypatch.setattr(bootstrap, "configure_logging", lambda level: None)

    with pytest.raises(SystemExit) as exc:
        app.main(["--no-sticky"])

    assert exc.value.code == 3
    assert not seen["settings"].sticky_selection
    assert seen["argv"][1:] == ["--no-sticky"]
