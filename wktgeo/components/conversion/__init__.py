"""
Conversion module between the geometry AST and shapely.

ShapelyConverter maps AST nodes to shapely geometries, WktConverter maps
shapely geometries back to AST nodes.
"""

from wktgeo.components.conversion.shapely_converter import ShapelyConverter, to_shapely
from wktgeo.components.conversion.wkt_converter import WktConverter, to_wkt

__all__ = [
    'ShapelyConverter',
    'to_shapely',
    'WktConverter',
    'to_wkt',
]
