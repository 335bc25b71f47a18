"""Loaders for resource dictionaries and scanned source files.

Both loaders isolate failures per file: a broken dictionary is skipped, an
unreadable source file is kept with empty contents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Union

from ..config import RESOURCE_DICTIONARY_ENCODING, RESOURCE_FILE_ENCODING
from ..exceptions import DictionaryParseError, SourceReadError
from ..log_config import debug_verbose, error_log
from ..models import ResourceDictionary, SourceFile
from ..utils import base_name

PathLike = Union[str, Path]


def parse_dictionary(path: PathLike) -> ResourceDictionary:
    try:
        text = Path(path).read_text(encoding=RESOURCE_DICTIONARY_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryParseError(path, f"unable to read: {exc}") from exc
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DictionaryParseError(path, f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DictionaryParseError(path, "top level must be a JSON object")
    return ResourceDictionary(name=base_name(path), keys=tuple(payload.keys()))


def load_dictionaries(paths: Iterable[PathLike]) -> List[ResourceDictionary]:
    dictionaries: List[ResourceDictionary] = []
    for path in paths:
        try:
            dictionary = parse_dictionary(path)
        except DictionaryParseError as exc:
            error_log("Unable to fetch resource file", exc)
            continue
        debug_verbose(
            "resource_dictionary", {"name": dictionary.name, "keys": len(dictionary.keys)}
        )
        dictionaries.append(dictionary)
    return dictionaries


def read_source(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding=RESOURCE_FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, str(exc)) from exc


def read_source_files(paths: Iterable[PathLike]) -> List[SourceFile]:
    files: List[SourceFile] = []
    for path in paths:
        try:
            contents = read_source(path)
        except SourceReadError as exc:
            error_log("Problem fetching file", exc)
            contents = ""
        files.append(SourceFile(file_name=base_name(path), contents=contents, path=str(path)))
    return files


__all__ = ["load_dictionaries", "parse_dictionary", "read_source", "read_source_files"]
