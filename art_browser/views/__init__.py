from .neighbourhood_view import NeighbourhoodView
from .type_view import TypeView
from .decade_view import DecadeView
from .map_view import MapView

__all__ = ["NeighbourhoodView", "TypeView", "DecadeView", "MapView"]
