"""
Tests for LinearSearch.

Linear search matches by substring against the full record and needs no ordering.
"""

import pytest

from src.algorithms.algorithm import SearchResult
from src.algorithms.linear_search import LinearSearch
from src.data_structures.directory import Directory


class TestLinearSearch:
    """Test suite for LinearSearch algorithm."""

    def setup_method(self):
        """Set up test fixtures."""
        self.directory = Directory.from_lines(["1 Alice", "2 Charlie", "3 Bob"])
        self.linear_search = LinearSearch(self.directory)

    def test_init(self):
        """Test initialization."""
        assert self.linear_search.directory is self.directory

    def test_search_found(self):
        """Test finding an entry on an unsorted directory."""
        result = self.linear_search.search("Bob")

        assert isinstance(result, SearchResult)
        assert result.found is True
        assert result.index == 2
        assert result.comparisons == 3
        assert result.time_taken >= 0

    def test_search_not_found(self):
        """Test searching for a missing name."""
        result = self.linear_search.search("Dave")

        assert result.found is False
        assert result.index == -1
        assert result.comparisons == 3

    def test_substring_match_against_raw_record(self):
        """Test that partial names and numbers also match."""
        assert self.linear_search.search("Char").index == 1
        assert self.linear_search.search("3 B").index == 2
        assert self.linear_search.search("2").index == 1

    def test_first_match_wins(self):
        """Test that the earliest containing entry is returned."""
        directory = Directory.from_lines(["1 Annabel", "2 Ann", "3 Ann"])

        result = LinearSearch(directory).search("Ann")

        assert result.index == 0
        assert result.comparisons == 1

    @pytest.mark.parametrize("target", ["", "   "])
    def test_search_invalid_target(self, target):
        """Test that empty queries are never found."""
        result = self.linear_search.search(target)

        assert result.found is False
        assert result.comparisons == 0

    def test_empty_directory(self):
        """Test searching an empty directory."""
        result = LinearSearch(Directory()).search("Alice")

        assert result.found is False
        assert result.index == -1

    def test_whitespace_query_is_not_a_substring_match(self):
        """Test that a blank query matches nothing even though every record has a space."""
        result = self.linear_search.search(" ")

        assert result.found is False
        assert self.linear_search.find_all([" ", "Bob"]) == [self.directory[2]]

    def test_find_all(self):
        """Test collecting hits for a query list."""
        hits = self.linear_search.find_all(["Bob", "Dave"])

        assert [entry.raw for entry in hits] == ["3 Bob"]

    def test_algorithm_name(self):
        """Test algorithm name."""
        assert self.linear_search.get_algorithm_name() == "Linear Search"
