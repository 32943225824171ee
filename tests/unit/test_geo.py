"""
Unit tests for GeoJSON helpers
"""

from datadata import geo, mappers
from datadata.engine import mapreduce


class TestFeatureConstructors:
    """Tests for point_feature and line_string_feature"""

    def test_point_feature(self):
        feature = geo.point_feature(16.37, 48.2, {'name': 'Vienna'})

        assert feature == {
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [16.37, 48.2]},
            'properties': {'name': 'Vienna'},
        }

    def test_line_string_feature(self):
        feature = geo.line_string_feature([[0, 0], [1, 1]], None)

        assert feature['geometry'] == {'type': 'LineString', 'coordinates': [[0, 0], [1, 1]]}
        assert feature['properties'] is None


class TestSegmentReducer:
    """Tests for segments()"""

    def collect(self, values, key='a'):
        emitted = []
        geo.segments()(key, values, lambda k, v: emitted.append((k, v)))
        return emitted

    def test_three_points_give_two_segments(self, track_records):
        points = [r for r in track_records if r['vehicle'] == 'a']
        emitted = self.collect(points)

        assert [k for k, _ in emitted] == ['a-1', 'a-2']
        first = emitted[0][1]
        assert first['geometry']['type'] == 'LineString'
        assert first['geometry']['coordinates'] == [[16.37, 48.20], [16.38, 48.21]]
        assert first['properties'] is points[0]
        assert emitted[1][1]['properties'] is points[1]

    def test_single_point_gives_no_segments(self, track_records):
        assert self.collect(track_records[:1]) == []

    def test_empty_group_gives_no_segments(self):
        assert self.collect([]) == []

    def test_custom_coordinate_attributes(self):
        emitted = []
        reduce_fn = geo.segments(lat_attr='y', lon_attr='x')
        reduce_fn('t', [{'x': 1, 'y': 2}, {'x': 3, 'y': 4}], lambda k, v: emitted.append((k, v)))

        assert emitted[0][1]['geometry']['coordinates'] == [[1, 2], [3, 4]]

    def test_tracks_through_engine(self, track_records):
        result = mapreduce(track_records, mappers.key('vehicle'), geo.segments())

        assert result.keys() == ['a-1', 'a-2']
