"""
Tests for strategy enumerations and factories.
"""

import pytest

from src.algorithms.binary_search import BinarySearch
from src.algorithms.hash_table_search import HashTableSearch
from src.algorithms.jump_search import JumpSearch
from src.algorithms.linear_search import LinearSearch
from src.benchmark.strategies import (
    SearchStrategy,
    SortStrategy,
    create_search,
    create_sorter,
)
from src.data_structures.directory import Directory
from src.data_structures.hash_index import HashIndex
from src.sorting.bubble_sort import BubbleSort
from src.sorting.quick_sort import QuickSort


class TestSortStrategy:
    """Test suite for SortStrategy."""

    @pytest.mark.parametrize(
        "name,strategy",
        [
            ("bubble", SortStrategy.BUBBLE),
            ("quick", SortStrategy.QUICK),
            (" Quick ", SortStrategy.QUICK),
            (SortStrategy.BUBBLE, SortStrategy.BUBBLE),
        ],
    )
    def test_from_name(self, name, strategy):
        """Test resolving known names."""
        assert SortStrategy.from_name(name) is strategy

    @pytest.mark.parametrize("name", ["merge", "", "bubblesort", None])
    def test_unknown_name_rejected(self, name):
        """Test that unknown names fail instead of defaulting."""
        with pytest.raises(ValueError, match="Unknown sort strategy"):
            SortStrategy.from_name(name)

    def test_create_sorter(self):
        """Test sorter factory."""
        assert isinstance(create_sorter(SortStrategy.BUBBLE), BubbleSort)
        assert isinstance(create_sorter(SortStrategy.QUICK), QuickSort)

    def test_create_sorter_returns_fresh_instances(self):
        """Test that statistics are not shared between runs."""
        assert create_sorter(SortStrategy.QUICK) is not create_sorter(SortStrategy.QUICK)


class TestSearchStrategy:
    """Test suite for SearchStrategy."""

    @pytest.mark.parametrize(
        "name,strategy",
        [
            ("linear", SearchStrategy.LINEAR),
            ("jump", SearchStrategy.JUMP),
            ("binary", SearchStrategy.BINARY),
            ("HASH", SearchStrategy.HASH),
        ],
    )
    def test_from_name(self, name, strategy):
        """Test resolving known names."""
        assert SearchStrategy.from_name(name) is strategy

    @pytest.mark.parametrize("name", ["interpolation", "bin", ""])
    def test_unknown_name_rejected(self, name):
        """Test that unknown names fail instead of defaulting."""
        with pytest.raises(ValueError, match="Unknown search strategy"):
            SearchStrategy.from_name(name)

    def test_requires_sorted(self):
        """Test which searches need a sorted directory."""
        assert SearchStrategy.JUMP.requires_sorted
        assert SearchStrategy.BINARY.requires_sorted
        assert not SearchStrategy.LINEAR.requires_sorted
        assert not SearchStrategy.HASH.requires_sorted

    def test_create_search(self):
        """Test search factory."""
        directory = Directory.from_lines(["1 Alice"])

        assert isinstance(create_search(SearchStrategy.LINEAR, directory), LinearSearch)
        assert isinstance(create_search(SearchStrategy.JUMP, directory), JumpSearch)
        assert isinstance(create_search(SearchStrategy.BINARY, directory), BinarySearch)

        hash_search = create_search(
            SearchStrategy.HASH, directory, HashIndex.build(directory)
        )
        assert isinstance(hash_search, HashTableSearch)
        assert hash_search.directory is directory

    def test_create_hash_search_requires_index(self):
        """Test that hash search cannot be created without an index."""
        with pytest.raises(ValueError):
            create_search(SearchStrategy.HASH, Directory())
