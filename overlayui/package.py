"""Loading of packaged UI projects stored as zip archives."""

from __future__ import annotations

import json
import logging
import os
import zipfile
from typing import Any, Dict, Optional, Union

log = logging.getLogger(__name__)

_UI_PREFIX = "ui/"
_TEXTURE_PREFIX = "texture/"


class PackageError(Exception):
    """Raised when a package cannot be opened or lacks required content."""


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


class PackageLoader:
    """Reads the event, texture and info configs, UI pages and textures of a package.

    The archive holds ``E``, ``T`` and ``I`` JSON files at its root, UI pages
    under ``ui/`` and images under ``texture/``. The info config survives
    ``done()``; everything else is dropped.
    """

    def __init__(self) -> None:
        self._zip: Optional[zipfile.ZipFile] = None
        self._events: Any = None
        self._textures: Any = None
        self._info: Any = None
        self._uis: Dict[str, Any] = {}
        self._texture_entries: Dict[str, zipfile.ZipInfo] = {}

    def __enter__(self) -> PackageLoader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.done()

    def load(
        self, zip_path: Union[str, "os.PathLike[str]"], texture_only: bool = False
    ) -> None:
        """Open ``zip_path``; unless ``texture_only``, the three configs must be present."""
        self.done()
        try:
            self._zip = zipfile.ZipFile(zip_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise PackageError(f"cannot open package {zip_path}: {exc}") from exc
        if not texture_only:
            try:
                events = self._read_config("E")
                textures = self._read_config("T")
                info = self._read_config("I")
            except PackageError:
                self.done()
                raise
            self._events = events
            self._textures = textures
            self._info = info
        self._cache_ui_files()
        self._cache_texture_entries()

    def _read_config(self, name: str) -> Any:
        assert self._zip is not None
        try:
            entry = self._zip.getinfo(name)
        except KeyError:
            raise PackageError(f"package has no {name} config") from None
        data = self._zip.read(entry)
        if not data:
            raise PackageError(f"config {name} is empty")
        try:
            return json.loads(data)
        except ValueError as exc:
            raise PackageError(f"config {name} is not valid JSON: {exc}") from exc

    def _cache_ui_files(self) -> None:
        assert self._zip is not None
        for entry in self._zip.infolist():
            path = _normalize(entry.filename)
            if not path.startswith(_UI_PREFIX) or len(path) == len(_UI_PREFIX):
                continue
            data = self._zip.read(entry)
            if not data:
                continue
            try:
                self._uis[path[len(_UI_PREFIX):]] = json.loads(data)
            except ValueError:
                log.warning("failed to load UI page %s", path)

    def _cache_texture_entries(self) -> None:
        assert self._zip is not None
        for entry in self._zip.infolist():
            path = _normalize(entry.filename)
            if path.startswith(_TEXTURE_PREFIX):
                self._texture_entries[path] = entry

    def texture(self, name: str) -> bytes:
        """Raw bytes of ``texture/<name>``, or empty bytes if it is absent."""
        entry = self._texture_entries.get(_TEXTURE_PREFIX + name)
        if entry is None or self._zip is None:
            return b""
        return self._zip.read(entry)

    def ui(self, name: str) -> Any:
        """Parsed UI page ``ui/<name>``, or ``None`` if there is none."""
        return self._uis.get(name)

    def events(self) -> Any:
        return self._events

    def textures(self) -> Any:
        return self._textures

    def info(self) -> Any:
        return self._info

    def done(self) -> None:
        """Close the archive and drop everything read from it except the info config."""
        if self._zip is not None:
            self._zip.close()
            self._zip = None
        self._events = None
        self._textures = None
        self._uis.clear()
        self._texture_entries.clear()