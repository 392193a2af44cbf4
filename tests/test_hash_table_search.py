"""
Tests for HashTableSearch.
"""

from src.algorithms.hash_table_search import HashTableSearch
from src.data_structures.directory import Directory
from src.data_structures.hash_index import HashIndex


class TestHashTableSearch:
    """Test suite for HashTableSearch algorithm."""

    def setup_method(self):
        """Set up test fixtures."""
        self.directory = Directory.from_lines(["1 Alice", "2 Charlie", "3 Bob"])
        self.hash_index = HashIndex.build(self.directory)
        self.hash_search = HashTableSearch(self.directory, self.hash_index)

    def test_search_found(self):
        """Test exact key lookup on an unsorted directory."""
        result = self.hash_search.search("Bob")

        assert result.found is True
        assert result.index == 2
        assert result.hash_operations == 1
        assert result.comparisons == 0

    def test_search_not_found(self):
        """Test lookup of a missing key."""
        result = self.hash_search.search("Dave")

        assert result.found is False
        assert result.index == -1

    def test_no_substring_match(self):
        """Test that partial names are not found."""
        assert self.hash_search.search("Bo").found is False

    def test_duplicate_key_returns_last_position(self):
        """Test last-write-wins lookups."""
        directory = Directory.from_lines(["1 Ann", "2 Bob", "3 Ann"])
        search = HashTableSearch(directory, HashIndex.build(directory))

        result = search.search("Ann")

        assert result.index == 2
        assert search.find_all(["Ann"])[0].raw == "3 Ann"

    def test_invalid_target(self):
        """Test that empty queries are never found."""
        result = self.hash_search.search("")

        assert result.found is False
        assert result.hash_operations == 0

    def test_algorithm_name(self):
        """Test algorithm name."""
        assert self.hash_search.get_algorithm_name() == "Hash Table"
