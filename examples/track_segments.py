"""
GPS track job for datadata.
Groups position fixes by vehicle and turns each track into GeoJSON line
segments keyed "<vehicle>-<n>".

    datadata run fixes.csv --job examples/track_segments.py
"""

from datadata import geo, mappers

map_function = mappers.key('vehicle')
reduce_function = geo.segments(lat_attr='lat', lon_attr='lon')
