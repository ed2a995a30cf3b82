import os
import uuid
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from dotenv import load_dotenv
from neo4j import GraphDatabase

from ..utils import EdgeType, FloatInt, FractionLike, VarSet, VertexType, normalize_phase
from .base import RewriteGraph
from .neo4j_queries import CypherGraphQueries

load_dotenv()

VT = int
ET = Tuple[int, int]


class GraphNeo4j(RewriteGraph[VT, ET]):
    """ZX-diagram stored in a Neo4j database.

    Vertices are ``:Node`` nodes and edges are ``:Wire`` relationships, all
    tagged with this graph's ``graph_id``. Vertex data such as the variable
    set is stored as a node property of the same name. The global scalar
    and the symbolic scalar factors stay on the Python object, so each
    instance still owns its own scalar.
    """

    backend = "neo4j"

    def __init__(
        self,
        uri: str = os.getenv("NEO4J_URI", ""),
        user: str = os.getenv("NEO4J_USER", ""),
        password: str = os.getenv("NEO4J_PASSWORD", ""),
        graph_id: Optional[str] = None,
        database: Optional[str] = os.getenv("NEO4J_DATABASE"),
    ):
        RewriteGraph.__init__(self)
        self.uri = uri
        self.user = user
        self.password = password
        self.database = database
        self._driver = None

        self.graph_id = graph_id if graph_id is not None else "graph_" + uuid.uuid4().hex

        self._vindex: int = 0
        self._maxr: int = -1
        self._inputs: Tuple[VT, ...] = tuple()
        self._outputs: Tuple[VT, ...] = tuple()

    @property
    def driver(self):
        """Create driver only when needed"""
        if self._driver is None:
            self._driver = GraphDatabase.driver(
                self.uri, auth=(self.user, self.password)
            )
        return self._driver

    def _get_session(self):
        if self.database:
            return self.driver.session(database=self.database)
        return self.driver.session()

    def close(self):
        """Explicitly close the driver"""
        if self._driver is not None:
            self._driver.close()
            self._driver = None

    def _read(self, query: str, **params: Any) -> List[Dict[str, Any]]:
        with self._get_session() as session:
            return session.execute_read(
                lambda tx: tx.run(query, graph_id=self.graph_id, **params).data()
            )

    def _write(self, query: str, **params: Any) -> List[Dict[str, Any]]:
        with self._get_session() as session:
            return session.execute_write(
                lambda tx: tx.run(query, graph_id=self.graph_id, **params).data()
            )

    def _node_property(self, vertex: VT, key: str) -> Any:
        rows = self._read(CypherGraphQueries.NODE_PROPERTY, id=vertex, key=key)
        if not rows:
            raise KeyError(vertex)
        return rows[0]["value"]

    def _set_node_property(self, vertex: VT, key: str, value: Any) -> None:
        self._write(CypherGraphQueries.SET_NODE_PROPERTY, id=vertex, props={key: value})

    def _phase_to_str(self, phase) -> str:
        if phase is None:
            return "0"
        return str(normalize_phase(phase))

    def create_graph(
        self,
        vertices_data: List[dict],
        edges_data: List[Tuple[Tuple[int, int], EdgeType]],
        inputs: Optional[List[int]] = None,
        outputs: Optional[List[int]] = None,
    ) -> List[VT]:
        """Bulk-creates vertices and edges in two queries.

        Edge endpoints and inputs/outputs are given as indices into
        ``vertices_data``; the new vertex handles are returned."""
        if not vertices_data:
            return []

        vertices = list(range(self._vindex, self._vindex + len(vertices_data)))

        all_vertices = []
        for v_id, data in zip(vertices, vertices_data):
            all_vertices.append(
                {
                    "id": v_id,
                    "t": int(data.get("ty", VertexType.BOUNDARY)),
                    "phase": self._phase_to_str(data.get("phase")),
                    "vars": sorted(data.get("vars", ())),
                    "qubit": data.get("qubit", -1),
                    "row": data.get("row", -1),
                }
            )

        all_edges = [
            {"s": vertices[s], "t": vertices[t], "et": int(et)}
            for (s, t), et in edges_data
        ]

        with self._get_session() as session:

            def create_full_graph(tx):
                tx.run(CypherGraphQueries.CREATE_NODES,
                       graph_id=self.graph_id, vertices=all_vertices)
                if all_edges:
                    tx.run(CypherGraphQueries.CREATE_WIRES,
                           graph_id=self.graph_id, edges=all_edges)

            session.execute_write(create_full_graph)

        self._vindex += len(vertices_data)
        if inputs:
            self._inputs = tuple(vertices[i] for i in inputs)
        if outputs:
            self._outputs = tuple(vertices[i] for i in outputs)

        return vertices

    def clone(self) -> "GraphNeo4j":
        """Copies the stored diagram to a fresh ``graph_id`` in the same database."""
        cpy = GraphNeo4j(
            uri=self.uri,
            user=self.user,
            password=self.password,
            database=self.database,
        )
        with self._get_session() as session:

            def copy_graph(tx):
                tx.run(CypherGraphQueries.COPY_NODES,
                       graph_id=self.graph_id, new_graph_id=cpy.graph_id)
                tx.run(CypherGraphQueries.COPY_WIRES,
                       graph_id=self.graph_id, new_graph_id=cpy.graph_id)

            session.execute_write(copy_graph)
        cpy._vindex = self._vindex
        cpy._inputs = tuple(self._inputs)
        cpy._outputs = tuple(self._outputs)
        self.copy_metadata_to(cpy)
        return cpy

    def delete_graph(self) -> None:
        """Removes every node of this graph from the database."""
        self._write(CypherGraphQueries.DELETE_GRAPH)

    def depth(self) -> int:
        # if unsure / fails, it returns -1.
        rows = self._read(CypherGraphQueries.MAX_ROW)
        self._maxr = int(rows[0]["maxr"]) if rows and rows[0]["maxr"] is not None else -1
        return self._maxr

    def vindex(self) -> int:
        return self._vindex

    # Vertices

    def add_vertex(self,
                   ty: VertexType = VertexType.BOUNDARY,
                   qubit: FloatInt = -1,
                   row: FloatInt = -1,
                   phase: Optional[FractionLike] = None,
                   ground: bool = False,
                   vars: VarSet = frozenset(),
                   ) -> VT:
        v = self._vindex
        self._write(
            CypherGraphQueries.CREATE_NODE,
            id=v,
            t=int(ty),
            phase=self._phase_to_str(phase),
            vars=sorted(vars),
            qubit=qubit,
            row=row,
        )
        self._vindex += 1
        return v

    def add_vertices(self, amount: int) -> List[VT]:
        return [self.add_vertex() for _ in range(amount)]

    def remove_vertices(self, vertices: Iterable[VT]) -> None:
        gone = set()
        for v in vertices:
            self._write(CypherGraphQueries.DELETE_NODE, id=v)
            gone.add(v)
        self._inputs = tuple(v for v in self._inputs if v not in gone)
        self._outputs = tuple(v for v in self._outputs if v not in gone)

    def remove_vertex(self, vertex: VT) -> None:
        self.remove_vertices([vertex])

    def vertices(self) -> Sequence[VT]:
        return [r["id"] for r in self._read(CypherGraphQueries.VERTEX_IDS)]

    def num_vertices(self) -> int:
        rows = self._read(CypherGraphQueries.COUNT_NODES)
        return rows[0]["count"] if rows else 0

    def contains_vertex(self, vertex: VT) -> bool:
        rows = self._read(CypherGraphQueries.COUNT_NODE, id=vertex)
        return bool(rows) and rows[0]["count"] > 0

    def vertex_type_opt(self, vertex: VT) -> Optional[VertexType]:
        rows = self._read(CypherGraphQueries.NODE_PROPERTY, id=vertex, key="t")
        if not rows or rows[0]["value"] is None:
            return None
        return VertexType(rows[0]["value"])

    def type(self, vertex: VT) -> VertexType:
        return VertexType(self._node_property(vertex, "t"))

    def set_type(self, vertex: VT, t: VertexType) -> None:
        self._set_node_property(vertex, "t", int(t))

    def phase(self, vertex: VT) -> Fraction:
        return normalize_phase(Fraction(self._node_property(vertex, "phase") or 0))

    def set_phase(self, vertex: VT, phase: FractionLike) -> None:
        self._set_node_property(vertex, "phase", self._phase_to_str(phase))

    def qubit(self, vertex: VT) -> FloatInt:
        q = self._node_property(vertex, "qubit")
        return -1 if q is None else q

    def set_qubit(self, vertex: VT, q: FloatInt) -> None:
        self._set_node_property(vertex, "qubit", q)

    def row(self, vertex: VT) -> FloatInt:
        r = self._node_property(vertex, "row")
        return -1 if r is None else r

    def set_row(self, vertex: VT, r: FloatInt) -> None:
        self._set_node_property(vertex, "row", r)

    def vdata(self, vertex: VT, key: str, default: Any = 0) -> Any:
        value = self._node_property(vertex, key)
        return default if value is None else value

    def set_vdata(self, vertex: VT, key: str, val: Any) -> None:
        # Neo4j properties can't hold sets
        if isinstance(val, (set, frozenset)):
            val = sorted(val)
        self._set_node_property(vertex, key, val)

    # Edges

    def add_edge(self, edge_pair: Tuple[VT, VT], edgetype: EdgeType = EdgeType.SIMPLE) -> ET:
        s, t = edge_pair
        if s == t:
            raise ValueError("Self-loop on vertex {}, use add_edge_smart".format(s))
        rows = self._write(CypherGraphQueries.CREATE_WIRE_IF_ABSENT, s=s, t=t, et=int(edgetype))
        if not rows or rows[0]["created"] == 0:
            raise ValueError(
                "Could not add edge {}: missing vertex or already connected".format(edge_pair))
        return self.edge(s, t)

    def remove_edge(self, edge: ET) -> None:
        s, t = edge
        self._write(CypherGraphQueries.DELETE_WIRE, s=s, t=t)

    def remove_edges(self, edges: Iterable[ET]) -> None:
        for e in edges:
            self.remove_edge(e)

    def edge(self, s: VT, t: VT, et: EdgeType = EdgeType.SIMPLE) -> ET:
        return (s, t) if s < t else (t, s)

    def edge_st(self, edge: ET) -> Tuple[VT, VT]:
        return edge

    def edge_type_opt(self, edge: ET) -> Optional[EdgeType]:
        s, t = edge
        rows = self._read(CypherGraphQueries.WIRE_TYPE, s=s, t=t)
        if not rows or rows[0]["t"] is None:
            return None
        return EdgeType(rows[0]["t"])

    def edge_type(self, edge: ET) -> EdgeType:
        et = self.edge_type_opt(edge)
        if et is None:
            raise KeyError(edge)
        return et

    def set_edge_type(self, edge: ET, t: EdgeType) -> None:
        s, v = edge
        self._write(CypherGraphQueries.SET_WIRE_TYPE, s=s, t=v, et=int(t))

    def connected(self, v1: VT, v2: VT) -> bool:
        return self.edge_type_opt(self.edge(v1, v2)) is not None

    def neighbor_edges(self, vertex: VT) -> List[Tuple[VT, EdgeType]]:
        rows = self._read(CypherGraphQueries.INCIDENT_WIRES, id=vertex)
        return [(r["neighbor"], EdgeType(r["t"])) for r in rows]

    def neighbors(self, vertex: VT) -> List[VT]:
        return [n for n, _ in self.neighbor_edges(vertex)]

    def vertex_degree(self, vertex: VT) -> int:
        return len(self.neighbor_edges(vertex))

    def incident_edges(self, vertex: VT) -> List[ET]:
        return [self.edge(vertex, n) for n, _ in self.neighbor_edges(vertex)]

    def edges(self) -> Sequence[ET]:
        return [self.edge(r["s"], r["t"]) for r in self._read(CypherGraphQueries.ALL_WIRES)]

    def num_edges(self) -> int:
        rows = self._read(CypherGraphQueries.COUNT_WIRES)
        return rows[0]["count"] if rows else 0

    def inputs(self) -> Tuple[VT, ...]:
        return self._inputs

    def set_inputs(self, inputs: Iterable[VT]) -> None:
        self._inputs = tuple(inputs)

    def outputs(self) -> Tuple[VT, ...]:
        return self._outputs

    def set_outputs(self, outputs: Iterable[VT]) -> None:
        self._outputs = tuple(outputs)
