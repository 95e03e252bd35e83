"""
Tests for instance file parsing and writing.
"""

import pytest

from knapsack_fptas.data import ItemSet, parse_instance, read_instance, write_instance
from knapsack_fptas.utils.error_handler import DataError


class TestParseInstance:
    """Header and item lines."""

    def test_parse(self):
        instance = parse_instance("capacity 7 optimum 9\n1 1\n3 4\n4 5\n5 7\n", name="k4")

        assert instance.name == "k4"
        assert instance.reference_value == 9
        assert instance.items.capacity == 7
        assert instance.items.weights == [1, 3, 4, 5]
        assert instance.items.values == [1, 4, 5, 7]

    def test_blank_lines_and_extra_tokens(self):
        instance = parse_instance("c 10 z 3 trailing\n\n2 3   \n\n1 0 extra\n")

        assert instance.items.weights == [2, 1]
        assert instance.items.values == [3, 0]

    def test_header_only(self):
        instance = parse_instance("c 10 z 0\n")

        assert len(instance.items) == 0
        assert instance.items.capacity == 10

    def test_empty_text(self):
        with pytest.raises(DataError, match="missing header"):
            parse_instance("")

    def test_short_header(self):
        with pytest.raises(DataError, match="4 tokens"):
            parse_instance("capacity 7\n1 1\n")

    def test_bad_number(self):
        with pytest.raises(DataError, match=":3:"):
            parse_instance("c 7 z 9\n1 1\n3 four\n")

    def test_single_token_line(self):
        with pytest.raises(DataError, match=":2:"):
            parse_instance("c 7 z 9\n1\n")

    def test_negative_weight(self):
        with pytest.raises(DataError, match="weight"):
            parse_instance("c 7 z 9\n-1 1\n")

    def test_negative_capacity(self):
        with pytest.raises(DataError, match="capacity"):
            parse_instance("c -7 z 9\n1 1\n")


class TestFiles:
    """Reading and writing files."""

    def test_read_shipped_example(self, example_instance_path, four_items):
        instance = read_instance(example_instance_path)

        assert instance.items == four_items
        assert instance.reference_value == 9
        assert instance.name == "example_4.txt"

    def test_write_then_read(self, tmp_path, four_items):
        path = write_instance(tmp_path / "out" / "k4.txt", four_items, reference_value=9)

        assert path.read_text().splitlines()[0] == "capacity 7 optimum 9"
        assert read_instance(path).items == four_items

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_instance(tmp_path / "nope.txt")

    def test_write_without_reference(self, tmp_path):
        path = write_instance(tmp_path / "e.txt", ItemSet((), 3))
        assert path.read_text() == "capacity 3 optimum 0\n"
