"""Tests for the record id generator."""

from inventory_app.ids import IdGenerator


class TestIdGenerator:
    def test_ids_are_strings(self):
        assert isinstance(IdGenerator().new_id(), str)

    def test_ids_are_unique(self):
        generator = IdGenerator()
        ids = {generator.new_id() for _ in range(5000)}
        assert len(ids) == 5000

    def test_callable_shorthand(self):
        generator = IdGenerator()
        assert generator() != generator()

    def test_separate_generators_use_random_suffixes(self):
        first = IdGenerator().new_id()
        second = IdGenerator().new_id()
        # Same counter value, different random suffix.
        assert first[:8] == second[:8]
        assert first != second
