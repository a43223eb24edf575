import json
import zipfile

import pytest

from overlayui.package import PackageError, PackageLoader

EVENTS = {"events": [1, 2]}
TEXTURES = {"textures": ["a.png"]}
INFO = {"initial_ui": "main.json", "width": 800, "height": 600}
PAGE = [{"Type": "Button", "Priority": 1}]


def make_package(path, *, skip=(), extra=None):
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in (("E", EVENTS), ("T", TEXTURES), ("I", INFO)):
            if name not in skip:
                zf.writestr(name, json.dumps(content))
        zf.writestr("ui/main.json", json.dumps(PAGE))
        zf.writestr("texture/a.png", b"\x89PNGdata")
        for name, data in (extra or {}).items():
            zf.writestr(name, data)
    return path


def test_load_reads_configs(tmp_path):
    path = make_package(tmp_path / "p.zip")
    with PackageLoader() as loader:
        loader.load(path)
        assert loader.events() == EVENTS
        assert loader.textures() == TEXTURES
        assert loader.info() == INFO


def test_ui_and_texture_lookup(tmp_path):
    path = make_package(tmp_path / "p.zip")
    loader = PackageLoader()
    loader.load(path)
    assert loader.ui("main.json") == PAGE
    assert loader.ui("missing.json") is None
    assert loader.texture("a.png") == b"\x89PNGdata"
    assert loader.texture("missing.png") == b""
    loader.done()


@pytest.mark.parametrize("missing", ["E", "T", "I"])
def test_missing_config_raises(tmp_path, missing):
    path = make_package(tmp_path / "p.zip", skip=(missing,))
    loader = PackageLoader()
    with pytest.raises(PackageError):
        loader.load(path)
    assert loader.texture("a.png") == b""


def test_texture_only_skips_configs(tmp_path):
    path = make_package(tmp_path / "p.zip", skip=("E", "T", "I"))
    loader = PackageLoader()
    loader.load(path, texture_only=True)
    assert loader.texture("a.png") == b"\x89PNGdata"
    assert loader.events() is None


def test_invalid_config_raises(tmp_path):
    path = tmp_path / "p.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("E", "{not json")
        zf.writestr("T", "{}")
        zf.writestr("I", "{}")
    with pytest.raises(PackageError):
        PackageLoader().load(path)


def test_bad_ui_page_is_skipped(tmp_path):
    path = make_package(tmp_path / "p.zip", extra={"ui/broken.json": "{oops"})
    loader = PackageLoader()
    loader.load(path)
    assert loader.ui("broken.json") is None
    assert loader.ui("main.json") == PAGE


def test_not_a_zip_raises(tmp_path):
    path = tmp_path / "p.zip"
    path.write_bytes(b"plain text")
    with pytest.raises(PackageError):
        PackageLoader().load(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(PackageError):
        PackageLoader().load(tmp_path / "nothing.zip")


def test_done_drops_content(tmp_path):
    path = make_package(tmp_path / "p.zip")
    loader = PackageLoader()
    loader.load(path)
    loader.done()
    assert loader.ui("main.json") is None
    assert loader.texture("a.png") == b""
    assert loader.events() is None


def test_backslash_paths_are_normalized(tmp_path):
    path = make_package(tmp_path / "p.zip", extra={"texture\\b.png": b"bee"})
    loader = PackageLoader()
    loader.load(path)
    assert loader.texture("b.png") == b"bee"
    loader.done()