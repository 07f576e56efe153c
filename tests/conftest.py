import pytest

from identicon.config import IdenticonConfig

SAMPLE_INPUTS = ["banana", "", "a", "elixir", "Ünïcødé ✓", "x" * 1000, "42"]

# md5("banana") = 72b302bf297a228a75730123efef7c41
BANANA_HEX = (114, 179, 2, 191, 41, 122, 34, 138, 117, 115, 1, 35, 239, 239, 124, 65)


@pytest.fixture
def config():
    return IdenticonConfig()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "IDENTICON_CANVAS_SIZE",
        "IDENTICON_GRID_DIMENSION",
        "IDENTICON_OUTPUT_DIR",
        "IDENTICON_OUTPUT_EXT",
        "IDENTICON_BACKGROUND",
    ):
        monkeypatch.delenv(name, raising=False)
