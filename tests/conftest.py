import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_gradient(width: int, height: int) -> Image.Image:
    """Colourful RGBA test image: red ramps along x, green along y, blue constant."""
    xs = np.linspace(0, 255, width, dtype=np.float32)[None, :]
    ys = np.linspace(0, 255, height, dtype=np.float32)[:, None]
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., 0] = np.broadcast_to(xs, (height, width)).astype(np.uint8)
    arr[..., 1] = np.broadcast_to(ys, (height, width)).astype(np.uint8)
    arr[..., 2] = 96
    arr[..., 3] = 255
    return Image.fromarray(arr)


@pytest.fixture
def gradient_image() -> Image.Image:
    return make_gradient(400, 300)


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    path = tmp_path / "source.png"
    make_gradient(64, 48).save(path)
    return path


@pytest.fixture
def make_image():
    return make_gradient
