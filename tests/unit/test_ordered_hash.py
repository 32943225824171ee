"""
Unit tests for OrderedHash
"""

import pytest

from datadata.ordered_hash import OrderedHash


@pytest.fixture
def ohash():
    return OrderedHash()


class TestOrderedHashEmpty:
    """Tests for a freshly created hash"""

    def test_is_empty_after_initialization(self, ohash):
        """Test that a new hash has no keys or values"""
        assert ohash.length() == 0
        assert len(ohash) == 0
        assert ohash.keys() == []
        assert ohash.values() == []
        assert ohash.unsorted_dict() == {}

    def test_lookups_return_none(self, ohash):
        assert ohash.get('missing') is None
        assert ohash.at(0) is None
        assert ohash.key(0) is None


class TestOrderedHashPush:
    """Tests for push semantics"""

    def test_keeps_insertion_order(self, ohash):
        """Test that keys come back in the order they were pushed"""
        ohash.push('b', 1)
        ohash.push('a', 2)
        ohash.push('c', 3)

        assert ohash.keys() == ['b', 'a', 'c']
        assert ohash.values() == [1, 2, 3]

    def test_push_existing_key_overwrites_in_place(self, ohash):
        """Test that pushing an existing key updates the value but not the position"""
        ohash.push('k', 'v')
        ohash.push('other', 'x')
        ohash.push('k', 'v2')

        assert ohash.length() == 2
        assert ohash.key(0) == 'k'
        assert ohash.get('k') == 'v2'

    def test_falsy_values_do_not_duplicate_keys(self, ohash):
        """Test that a key holding a falsy value is still treated as present"""
        ohash.push('zero', 0)
        ohash.push('zero', 1)
        ohash.push('none', None)
        ohash.push('none', 'set')

        assert ohash.keys() == ['zero', 'none']
        assert ohash.get('zero') == 1
        assert ohash.get('none') == 'set'


class TestOrderedHashInsert:
    """Tests for positional insert"""

    def test_inserts_new_key_at_position(self, ohash):
        ohash.push('a', 1)
        ohash.push('c', 3)
        ohash.insert(1, 'b', 2)

        assert ohash.keys() == ['a', 'b', 'c']
        assert ohash.at(1) == 2

    def test_insert_existing_key_is_noop(self, ohash):
        """Test that inserting an existing key changes neither position nor value"""
        ohash.push('a', 1)
        ohash.push('b', 2)
        ohash.insert(0, 'b', 99)

        assert ohash.length() == 2
        assert ohash.keys() == ['a', 'b']
        assert ohash.get('b') == 2

    def test_insert_index_is_clamped(self, ohash):
        ohash.push('a', 1)
        ohash.insert(100, 'end', 2)
        ohash.insert(-5, 'start', 0)

        assert ohash.keys() == ['start', 'a', 'end']


class TestOrderedHashAccess:
    """Tests for positional and bulk access"""

    def test_positional_access(self, ohash):
        ohash.push('x', 10)
        ohash.push('y', 20)

        assert ohash.at(0) == 10
        assert ohash.at(1) == 20
        assert ohash.at(2) is None
        assert ohash.at(-1) is None
        assert ohash.key(1) == 'y'

    def test_keys_returns_copy(self, ohash):
        """Test that mutating the returned key list does not affect the hash"""
        ohash.push('x', 1)
        keys = ohash.keys()
        keys.append('intruder')
        keys.reverse()

        assert ohash.keys() == ['x']

    def test_map_applies_function_in_order(self, ohash):
        ohash.push('a', 1)
        ohash.push('b', 2)

        assert ohash.map(lambda k, v: f"{k}={v}") == ['a=1', 'b=2']

    def test_python_protocols(self, ohash):
        ohash.push('a', 1)
        ohash.push('b', 2)

        assert list(ohash) == ['a', 'b']
        assert 'a' in ohash
        assert 'z' not in ohash
        assert ohash.items() == [('a', 1), ('b', 2)]
        assert ohash.to_dict() == {'a': 1, 'b': 2}
