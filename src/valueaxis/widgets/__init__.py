from .canvas import CanvasWidget, ImageCanvas
from .graph_values import GraphValues

__all__ = ['CanvasWidget', 'ImageCanvas', 'GraphValues']
