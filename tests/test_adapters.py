from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image

from kelp.adapters import (
    ImageProperties,
    LocalFile,
    PillowImageFactory,
    StreamWrapperUrlGenerator,
)
from kelp.common.types import FileEntity
from kelp.config import Settings


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "files"
    (directory / "heroes").mkdir(parents=True)
    Image.new("RGB", (64, 32), color="teal").save(directory / "heroes" / "kelp.png")
    (directory / "notes.txt").write_text("not an image", encoding="utf-8")
    return directory


def test_url_generator_maps_stream_wrappers():
    generator = StreamWrapperUrlGenerator(
        "https://example.com/",
        {"public": "https://example.com/sites/default/files/"},
    )
    assert (
        generator.generate_absolute_string("public://heroes/kelp forest.png")
        == "https://example.com/sites/default/files/heroes/kelp%20forest.png"
    )
    assert (
        generator.generate_absolute_string("core/misc/logo.svg")
        == "https://example.com/core/misc/logo.svg"
    )
    assert (
        generator.generate_absolute_string("https://cdn.example.org/a.png")
        == "https://cdn.example.org/a.png"
    )


def test_url_generator_rejects_unknown_stream_wrapper():
    generator = StreamWrapperUrlGenerator("https://example.com", {})
    with pytest.raises(ValueError, match="temporary://"):
        generator.generate_absolute_string("temporary://upload.png")


def test_url_generator_from_settings(monkeypatch):
    monkeypatch.setenv("KELP_SITE_URL", "https://kelp.test/")
    monkeypatch.setenv("KELP_PRIVATE_FILES_PATH", "/srv/private")
    generator = StreamWrapperUrlGenerator.from_settings(Settings())
    assert (
        generator.generate_absolute_string("public://a.png")
        == "https://kelp.test/sites/default/files/a.png"
    )
    assert (
        generator.generate_absolute_string("private://b.png")
        == "https://kelp.test/system/files/b.png"
    )


def test_pillow_image_factory_reads_dimensions(public_dir: Path):
    factory = PillowImageFactory({"public": public_dir})
    image = factory.get("public://heroes/kelp.png")
    assert image.get_width() == 64
    assert image.get_height() == 32
    assert image.get_file_size() == (public_dir / "heroes" / "kelp.png").stat().st_size


def test_pillow_image_factory_missing_file_logs_warning(public_dir: Path, caplog):
    factory = PillowImageFactory({"public": public_dir})
    with caplog.at_level(logging.WARNING):
        image = factory.get("public://missing.png")
    assert image == ImageProperties()
    assert any(
        record.name == "kelp.adapters" and "could not be read" in record.getMessage()
        for record in caplog.records
    )


def test_pillow_image_factory_non_image_keeps_size(public_dir: Path, caplog):
    factory = PillowImageFactory({"public": public_dir})
    with caplog.at_level(logging.WARNING):
        image = factory.get("public://notes.txt")
    assert image.get_file_size() == len("not an image")
    assert image.get_width() is None
    assert image.get_height() is None
    assert "not a readable image" in caplog.text


def test_pillow_image_factory_resolves_plain_paths(public_dir: Path):
    factory = PillowImageFactory({}, base_path=public_dir)
    assert factory.get("heroes/kelp.png").get_width() == 64
    with pytest.raises(ValueError, match="private://"):
        factory.get("private://secret.png")


def test_local_file_satisfies_file_contract():
    assert isinstance(LocalFile(fid=1, uri="public://a.png"), FileEntity)


def test_pillow_image_factory_oversized_image_logs_warning(
    public_dir: Path, monkeypatch, caplog
):
    Image.new("RGB", (100, 100)).save(public_dir / "big.png")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    factory = PillowImageFactory({"public": public_dir})
    with caplog.at_level(logging.WARNING):
        image = factory.get("public://big.png")
    assert image == ImageProperties(
        file_size=(public_dir / "big.png").stat().st_size
    )
    assert "not a readable image" in caplog.text


@pytest.mark.parametrize(
    "source", ["public://../../etc/passwd", "public:///../outside.png", "../x.png"]
)
def test_pillow_image_factory_rejects_paths_outside_root(public_dir: Path, source):
    factory = PillowImageFactory({"public": public_dir}, base_path=public_dir)
    with pytest.raises(ValueError, match="resolves outside"):
        factory.get(source)
