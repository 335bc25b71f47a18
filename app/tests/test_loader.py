from __future__ import annotations

import json
from pathlib import Path

import pytest

from resource_lint.exceptions import DictionaryParseError, SourceReadError
from resource_lint.models import SourceFile
from resource_lint.sources import load_dictionaries, read_source_files
from resource_lint.sources.loader import parse_dictionary, read_source


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_parse_dictionary_keeps_top_level_keys_in_order(tmp_path: Path) -> None:
    path = _write_json(
        tmp_path / "en.json",
        {"greeting_text": "Hi", "nested": {"inner_key": "x"}, "stale_key": "X"},
    )

    dictionary = parse_dictionary(path)

    assert dictionary.name == "en.json"
    assert dictionary.keys == ("greeting_text", "nested", "stale_key")
    assert dictionary.declares("stale_key")
    assert not dictionary.declares("inner_key")


def test_parse_dictionary_rejects_non_object(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "list.json", ["greeting_text"])

    with pytest.raises(DictionaryParseError):
        parse_dictionary(path)


def test_load_dictionaries_skips_broken_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    good = _write_json(tmp_path / "en.json", {"greeting_text": "Hi"})
    broken = tmp_path / "fr.json"
    broken.write_text("{ not json", encoding="utf-8")
    missing = tmp_path / "de.json"

    dictionaries = load_dictionaries([broken, good, missing])

    assert [dictionary.name for dictionary in dictionaries] == ["en.json"]
    stderr = capsys.readouterr().err
    assert "fr.json" in stderr
    assert "de.json" in stderr
    assert "[ERROR]" in stderr


def test_load_dictionaries_empty_input() -> None:
    assert load_dictionaries([]) == []


def test_read_source_files_keeps_failed_reads(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    first = tmp_path / "app.component.html"
    first.write_text("<p>{{ 'greeting_text' | skyAppResources }}</p>", encoding="utf-8")
    gone = tmp_path / "gone.component.ts"
    binary = tmp_path / "binary.component.ts"
    binary.write_bytes(b"\xff\xfe\x00bad")

    files = read_source_files([first, gone, binary])

    assert [source.file_name for source in files] == [
        "app.component.html",
        "gone.component.ts",
        "binary.component.ts",
    ]
    assert files[0].contents.startswith("<p>")
    assert files[1] == SourceFile("gone.component.ts", "", str(gone))
    assert files[2].contents == ""
    assert "gone.component.ts" in capsys.readouterr().err


def test_read_source_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError) as excinfo:
        read_source(tmp_path / "nope.ts")

    assert excinfo.value.path.endswith("nope.ts")


def test_dictionary_with_byte_order_mark_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "en.json"
    path.write_bytes(b'\xef\xbb\xbf{"greeting_text": "Hi"}')

    dictionaries = load_dictionaries([path])

    assert [dictionary.name for dictionary in dictionaries] == ["en.json"]
    assert dictionaries[0].keys == ("greeting_text",)
