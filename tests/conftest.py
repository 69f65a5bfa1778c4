"""
Pytest configuration and shared fixtures for the logo tools.
"""

import sys
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

# tests/conftest.py -> tests/ -> repository root (holds the script modules)
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def transparent_logo(tmp_path):
    path = tmp_path / "transparent.png"
    Image.new("RGBA", (64, 48), (0, 0, 0, 0)).save(path, "PNG")
    return path


@pytest.fixture
def red_logo(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGBA", (80, 80), (255, 0, 0, 255)).save(path, "PNG")
    return path


@pytest.fixture
def badge_logo(tmp_path):
    """Opaque blue dot in the middle of a transparent square."""
    path = tmp_path / "badge.png"
    img = Image.new("RGBA", (100, 100), (0, 0, 0, 0))
    ImageDraw.Draw(img).ellipse((30, 30, 69, 69), fill=(0, 0, 255, 255))
    img.save(path, "PNG")
    return path
