"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_uniform_image(H, W, color=(120, 60, 200)):
    """Solid-color RGB uint8 image (3, H, W)."""
    return torch.tensor(color, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W).clone()


def make_edge_image(H, W, edge_col):
    """RGB uint8 image: black left of `edge_col`, white from it onwards."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    image[:, :, edge_col:] = 255
    return image


@pytest.fixture
def random_image():
    """Reproducible random RGB uint8 image, 12 rows by 15 columns."""
    torch.manual_seed(42)
    return torch.randint(0, 256, (3, 12, 15), dtype=torch.uint8)
