"""Shared test fixtures for virtual-scaling."""

import pytest

from virtual_scaling import TransformNode


@pytest.fixture
def identity_root():
    """Root node whose virtual size equals its actual size."""
    return TransformNode(10, 20, 100, 50)


@pytest.fixture
def scaled_root():
    """512x512 pixel viewport at (128, 128) with a 1024x1024 virtual space."""
    return TransformNode(128, 128, 512, 512, virtual_width=1024, virtual_height=1024)


@pytest.fixture
def chain(scaled_root):
    """Three-level chain: root, child and grandchild, each 2x scaled.

    The fixture returns all three so no node's parent is collected.
    """
    child = scaled_root.create_child(32, 32, 1024, 1024)
    grandchild = child.create_child(0, 0, 1024, 1024)
    return scaled_root, child, grandchild
