import copy
from typing import Iterable, List, Tuple

from pyzx.graph.graph_s import GraphS as SimpleGraph

from ..utils import EdgeType
from .base import RewriteGraph

VT = int
ET = Tuple[int, int]


class GraphS(RewriteGraph[VT, ET], SimpleGraph):
    """PyZX's dict-of-dicts :class:`~pyzx.graph.graph_s.GraphS`, made rewritable.

    Unlike the plain PyZX graph, :meth:`add_edge` refuses to silently
    overwrite an existing edge or to create a self-loop; those have to go
    through :meth:`add_edge_smart`.
    """

    backend = 'simple'

    def clone(self) -> 'GraphS':
        return copy.deepcopy(self)

    def contains_vertex(self, vertex: VT) -> bool:
        return vertex in self.graph

    def add_edge(self, edge_pair: Tuple[VT, VT], edgetype: EdgeType = EdgeType.SIMPLE) -> ET:
        s, t = edge_pair
        if s == t:
            raise ValueError("Self-loop on vertex {}, use add_edge_smart".format(s))
        if t in self.graph[s]:
            raise ValueError("Vertices {} and {} are already connected, use add_edge_smart".format(s, t))
        SimpleGraph.add_edge(self, edge_pair, edgetype)
        return self.edge(s, t)

    def remove_vertices(self, vertices: Iterable[VT]) -> None:
        gone = set(vertices)
        # handles of removed vertices are never handed out again
        vindex = self.vindex()
        SimpleGraph.remove_vertices(self, list(gone))
        self._vindex = max(self.vindex(), vindex)
        self.set_inputs(tuple(v for v in self.inputs() if v not in gone))
        self.set_outputs(tuple(v for v in self.outputs() if v not in gone))

    def neighbor_edges(self, vertex: VT) -> List[Tuple[VT, EdgeType]]:
        return list(self.graph[vertex].items())
