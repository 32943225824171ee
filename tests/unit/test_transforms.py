"""
Unit tests for record transform helpers
"""

from datadata import transforms


class TestEnvelope:
    """Tests for envelope()"""

    def test_wraps_record(self):
        assert transforms.envelope('data')({'a': 1}) == {'data': {'a': 1}}

    def test_pulls_attribute_to_top_level(self):
        record = {'id': 7, 'a': 1}
        result = transforms.envelope('data', 'id')(record)

        assert result == {'data': {'a': 1}, 'id': 7}
        assert record == {'id': 7, 'a': 1}

    def test_accepts_function_as_second_argument(self):
        result = transforms.envelope('data', transforms.prefix('p_'))({'a': 1})

        assert result == {'data': {'p_a': 1}}

    def test_applies_inner_function_first(self):
        inner = transforms.map_attr({'id': 'key'})
        result = transforms.envelope('data', 'id', inner)({'key': 3, 'a': 1})

        assert result == {'data': {'a': 1}, 'id': 3}


class TestPrefix:
    """Tests for prefix() and prefix_attr()"""

    def test_prefix_renames_all_fields(self):
        assert transforms.prefix('x_')({'a': 1, 'b': 2}) == {'x_a': 1, 'x_b': 2}

    def test_prefix_attr_uses_attribute_value(self):
        result = transforms.prefix_attr('year')({'year': 2020, 'pop': 5})

        assert result == {'2020_year': 2020, '2020_pop': 5}

    def test_prefix_attr_empty_when_attribute_missing(self):
        assert transforms.prefix_attr('year')({'pop': 5}) == {'pop': 5}

    def test_chained(self):
        func = transforms.prefix('a_', transforms.prefix('b_'))

        assert func({'c': 1}) == {'a_b_c': 1}


class TestMapAttr:
    """Tests for map_attr()"""

    def test_function_spec_delegates(self):
        assert transforms.map_attr(lambda d: {'n': len(d)})({'a': 1, 'b': 2}) == {'n': 2}

    def test_derives_fields(self):
        func = transforms.map_attr({'density': lambda d: d['pop'] / d['area']})

        assert func({'pop': 100, 'area': 4}) == {'pop': 100, 'area': 4, 'density': 25}

    def test_renames_truthy_fields(self):
        func = transforms.map_attr({'name': 'NAME', 'code': 'CODE'})

        assert func({'NAME': 'Austria', 'CODE': ''}) == {'CODE': '', 'name': 'Austria'}

    def test_does_not_mutate_input(self):
        record = {'NAME': 'Austria'}
        transforms.map_attr({'name': 'NAME'})(record)

        assert record == {'NAME': 'Austria'}


class TestReverse:
    def test_reverses_copy(self):
        data = [1, 2, 3]

        assert transforms.reverse(data) == [3, 2, 1]
        assert data == [1, 2, 3]

    def test_other_values_unchanged(self):
        assert transforms.reverse({'a': 1}) == {'a': 1}
