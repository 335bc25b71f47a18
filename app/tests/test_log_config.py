from __future__ import annotations

from pathlib import Path

import pytest

from resource_lint import log_config


def test_error_log_appends_to_configured_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    log_file = tmp_path / "logs" / "lint.txt"
    monkeypatch.setattr(log_config, "LOG_FILE", str(log_file))

    log_config.error_log("Unable to fetch resource file", "fr.json")
    log_config.error_log("Problem fetching file", "a.ts")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[ERROR][")
    assert lines[0].endswith("Unable to fetch resource file: fr.json")
    assert "a.ts" in capsys.readouterr().err


def test_verbose_log_is_silent_by_default(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(log_config, "VERBOSE", False)
    monkeypatch.setattr(log_config, "LOG_FILE", None)

    log_config.verbose_log("loaded", {"dictionaries": 1})

    assert capsys.readouterr().err == ""
