import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pypdf import PdfReader
from img_to_pdf.converter import ImageToPDFConverter
from img_to_pdf.errors import DirectoryError, InvalidInputError, NoImagesFoundError
from img_to_pdf.logger import Logger


def _converter():
    return ImageToPDFConverter(logger=Logger(quiet=True))


def _names(paths):
    return [Path(p).name for p in paths]


def test_convert_order_by_name(make_image, tmp_path):
    paths = [
        make_image("b.jpg", mtime=1000),
        make_image("a.jpg", mtime=2000),
        make_image("c.jpg", mtime=3000),
    ]
    output = tmp_path / "output_nam.pdf"

    pages = _converter().convert(",".join(map(str, paths)), str(output), "nam")

    assert _names(pages) == ["a.jpg", "b.jpg", "c.jpg"]
    assert len(PdfReader(str(output)).pages) == 3


def test_convert_order_by_mod_time(make_image, tmp_path):
    paths = [
        make_image("new.jpg", mtime=3000),
        make_image("old.jpg", mtime=1000),
        make_image("middle.jpg", mtime=2000),
    ]
    output = tmp_path / "output_mod.pdf"

    pages = _converter().convert(",".join(map(str, paths)), str(output), "mod")

    assert _names(pages) == ["old.jpg", "middle.jpg", "new.jpg"]


def test_convert_sequential_keeps_input_order(make_image, tmp_path):
    paths = [
        make_image("one.jpg", mtime=3000),
        make_image("two.jpg", mtime=1000),
        make_image("three.jpg", mtime=2000),
    ]
    output = tmp_path / "output_seq.pdf"

    pages = _converter().convert(",".join(map(str, paths)), str(output))

    assert pages == [str(p) for p in paths]


def test_unknown_order_falls_back_to_sequential(make_image, tmp_path):
    paths = [make_image("z.jpg"), make_image("a.jpg")]

    pages = _converter().convert(
        ",".join(map(str, paths)), str(tmp_path / "out.pdf"), "sideways"
    )

    assert _names(pages) == ["z.jpg", "a.jpg"]


def test_convert_ignores_empty_entries(make_image, tmp_path):
    path1 = make_image("image1.jpg")
    path2 = make_image("image2.jpg")
    output = tmp_path / "output.pdf"

    converter = _converter()
    converter.convert(f"{path1}, , {path2}, ", str(output))

    assert len(PdfReader(str(output)).pages) == 2
    assert converter.stats.collected == 2
    assert converter.stats.skipped == 0
    assert converter.stats.pages == 2


def test_convert_mixed_inputs(make_image, tmp_path):
    album = tmp_path / "album"
    for name in ["image1.jpg", "image2.jpg", "image3.jpg"]:
        make_image(name, directory=album)
    extra = make_image("extra.png")
    output = tmp_path / "mixed.pdf"

    pages = _converter().convert(f"{album},{extra}", str(output))

    assert _names(pages) == ["image1.jpg", "image2.jpg", "image3.jpg", "extra.png"]
    assert len(PdfReader(str(output)).pages) == 4


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_convert_empty_input(value, tmp_path):
    output = tmp_path / "output.pdf"

    with patch("img_to_pdf.converter.FileCollector") as mock_collector_class:
        with pytest.raises(InvalidInputError):
            ImageToPDFConverter(logger=Logger(quiet=True)).convert(value, str(output))

    mock_collector_class.return_value.collect_images.assert_not_called()
    assert not output.exists()


def test_convert_nonexistent_file(tmp_path):
    output = tmp_path / "output.pdf"
    converter = _converter()

    with pytest.raises(NoImagesFoundError):
        converter.convert(str(tmp_path / "no_such_file.jpg"), str(output))

    assert not output.exists()
    assert converter.stats.skipped == 1


def test_convert_only_blank_segments_is_no_images(tmp_path):
    with pytest.raises(NoImagesFoundError):
        _converter().convert(" , ,", str(tmp_path / "output.pdf"))


def test_convert_propagates_directory_error(tmp_path):
    output = tmp_path / "output.pdf"
    album = tmp_path / "album"
    album.mkdir()

    with patch("img_to_pdf.file_collector.os.walk") as mock_walk:
        def walk(top, onerror=None):
            onerror(PermissionError(13, "Permission denied", top))
            return iter(())

        mock_walk.side_effect = walk
        with pytest.raises(DirectoryError) as e:
            _converter().convert(str(album), str(output))

    assert e.value.path == str(album)
    assert not output.exists()


def test_convert_passes_ordered_paths_to_builder(make_image, tmp_path):
    paths = [make_image("b.jpg"), make_image("a.jpg")]

    with patch("img_to_pdf.converter.PDFBuilder") as mock_builder_class:
        converter = ImageToPDFConverter(logger=Logger(quiet=True))
        converter.convert(",".join(map(str, paths)), "out.pdf", "nam")

    mock_builder_class.return_value.build.assert_called_once_with(
        [str(paths[1]), str(paths[0])], "out.pdf"
    )


def test_convert_unreadable_subdirectory_writes_nothing(make_image, tmp_path, monkeypatch):
    album = tmp_path / "album"
    make_image("cover.jpg", directory=album)
    make_image("page.jpg", directory=album / "chapter")
    chapter = str(album / "chapter")
    output = tmp_path / "output.pdf"
    real_scandir = os.scandir

    def scandir(path):
        if os.fspath(path) == chapter:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    with pytest.raises(DirectoryError) as e:
        _converter().convert(str(album), str(output))

    assert e.value.path == chapter
    assert not output.exists()
