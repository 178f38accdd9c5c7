import os

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Create a small solid-colour image, optionally with a fixed mtime"""

    def _make(name, mtime=None, directory=None, size=(20, 10), mode="RGB", fmt=None):
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color="red" if mode == "RGB" else 0).save(path, format=fmt)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make
