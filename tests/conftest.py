"""Test configuration and fixtures for pathtree."""

import pytest

from pathtree.path_tree.path_tree import PathTree


@pytest.fixture
def arthur_tree():
    """Tree holding Arthur's two files under a shared home directory."""
    tree = PathTree()
    tree.insert("home/users/arthur/answer.txt", 42)
    tree.insert("home/users/arthur/password.txt", 128)
    return tree


@pytest.fixture
def sibling_tree():
    """Tree with two valued siblings under one structural node."""
    tree = PathTree()
    tree.insert("a/b", 10)
    tree.insert("a/c", 20)
    return tree
