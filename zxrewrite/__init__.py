__version__ = "0.1.0"

from .utils import EdgeType, VertexType
from .scalar import Scalar
from .params import Expr
from .graph.base import RewriteGraph, VData
from .graph.graph_s import GraphS
from . import basic_rules
from .rewrite_runner import run_rewrite, run_rewrites, list_available_rules, Stats
