"""
End-to-end checks on the whole pipeline, including the pinned "banana" fixture.
"""
import numpy as np
import pytest

from identicon import build_identicon, generate
from identicon.config import IdenticonConfig
from identicon.services.render_service import RenderService
from conftest import BANANA_HEX, SAMPLE_INPUTS

BANANA_GRID = [
    (179, 1), (179, 3),
    (191, 5), (41, 6), (41, 8), (191, 9),
    (117, 12),
    (115, 15), (1, 16), (35, 17), (1, 18), (115, 19),
    (239, 20), (239, 21), (239, 23), (239, 24),
]

BANANA_PIXEL_MAP = [
    ((50, 0), (100, 50)), ((150, 0), (200, 50)),
    ((0, 50), (50, 100)), ((50, 50), (100, 100)), ((150, 50), (200, 100)), ((200, 50), (250, 100)),
    ((100, 100), (150, 150)),
    ((0, 150), (50, 200)), ((50, 150), (100, 200)), ((100, 150), (150, 200)),
    ((150, 150), (200, 200)), ((200, 150), (250, 200)),
    ((0, 200), (50, 250)), ((50, 200), (100, 250)), ((150, 200), (200, 250)), ((200, 200), (250, 250)),
]


def test_banana_golden():
    image = build_identicon("banana")

    assert image.hex == BANANA_HEX
    assert image.color == (114, 179, 2)
    assert [tuple(cell) for cell in image.grid] == BANANA_GRID
    assert list(image.pixel_map) == BANANA_PIXEL_MAP


def test_banana_pixels():
    pixels = build_identicon("banana").pixels
    painted = {index for _, index in BANANA_GRID}

    for index in range(25):
        x, y = (index % 5) * 50 + 25, (index // 5) * 50 + 25
        expected = (114, 179, 2) if index in painted else (255, 255, 255)
        assert tuple(pixels[y, x]) == expected, index


@pytest.mark.parametrize("value", SAMPLE_INPUTS)
def test_same_input_same_png(value):
    render = RenderService()
    first = render.encode_png(build_identicon(value))
    second = render.encode_png(build_identicon(value))
    assert first == second


def test_image_is_left_right_symmetric():
    pixels = build_identicon("symmetry").pixels
    assert np.array_equal(pixels, pixels[:, ::-1])


def test_different_inputs_differ():
    assert build_identicon("alice").hex != build_identicon("bob").hex


def test_generate_writes_input_named_png(tmp_path):
    path = generate("banana", output_dir=tmp_path)

    assert path == tmp_path / "banana.png"
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_generate_is_byte_identical_across_runs(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = generate("banana", output_dir=tmp_path / "a")
    second = generate("banana", output_dir=tmp_path / "b")
    assert first.read_bytes() == second.read_bytes()


def test_generate_uses_configured_directory(tmp_path):
    config = IdenticonConfig(output_dir=tmp_path)
    assert generate("cfg", config=config) == tmp_path / "cfg.png"


def test_generate_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = generate("here")
    assert (tmp_path / "here.png").is_file()
    assert path.name == "here.png"


def test_smaller_grid_end_to_end():
    image = build_identicon("banana", config=IdenticonConfig(canvas_size=90, grid_dimension=3))
    assert image.pixels.shape == (90, 90, 3)
    for (x0, y0), (x1, y1) in image.pixel_map:
        assert (x1 - x0, y1 - y0) == (30, 30)


def test_library_reads_settings_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("IDENTICON_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("IDENTICON_CANVAS_SIZE", "150")

    assert generate("envcheck") == tmp_path / "envcheck.png"
    assert build_identicon("envcheck").pixels.shape == (150, 150, 3)
