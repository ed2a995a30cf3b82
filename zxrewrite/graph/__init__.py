from .base import RewriteGraph, VData
from .graph_s import GraphS

__all__ = ['RewriteGraph', 'VData', 'GraphS']
