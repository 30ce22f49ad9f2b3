from .vector import Vec2
from .line import LineSeg, Line
from .polygon import Polygon
from .polygon_set import PolygonSet

__all__ = ["Vec2", "LineSeg", "Line", "Polygon", "PolygonSet"]
