from .grid_cell import GridCell
from .image import Color, Image, Point, Rect

__all__ = ["Color", "GridCell", "Image", "Point", "Rect"]
