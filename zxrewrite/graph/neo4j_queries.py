class CypherGraphQueries:
    """Cypher used by :class:`~zxrewrite.graph.graph_neo4j.GraphNeo4j`.

    Every query is scoped by ``$graph_id`` so several diagrams can live in
    the same database. Edges are stored once, as a directed ``:Wire``
    relationship, and always matched undirected.
    """

    CREATE_NODES = """
    UNWIND $vertices AS v
    CREATE (n:Node {
        graph_id: $graph_id,
        id: v.id,
        t: v.t,
        phase: v.phase,
        vars: v.vars,
        qubit: v.qubit,
        row: v.row
    })
    """

    CREATE_WIRES = """
    UNWIND $edges AS e
    MATCH (n1:Node {graph_id: $graph_id, id: e.s})
    MATCH (n2:Node {graph_id: $graph_id, id: e.t})
    CREATE (n1)-[:Wire {t: e.et}]->(n2)
    """

    CREATE_NODE = """
    CREATE (n:Node {graph_id: $graph_id, id: $id, t: $t, phase: $phase,
                    vars: $vars, qubit: $qubit, row: $row})
    """

    DELETE_NODE = """
    MATCH (n:Node {graph_id: $graph_id, id: $id})
    DETACH DELETE n
    """

    DELETE_GRAPH = """
    MATCH (n:Node {graph_id: $graph_id})
    DETACH DELETE n
    """

    VERTEX_IDS = """
    MATCH (n:Node {graph_id: $graph_id})
    RETURN n.id AS id ORDER BY id
    """

    COUNT_NODES = """
    MATCH (n:Node {graph_id: $graph_id})
    RETURN count(n) AS count
    """

    COUNT_NODE = """
    MATCH (n:Node {graph_id: $graph_id, id: $id})
    RETURN count(n) AS count
    """

    NODE_PROPERTY = """
    MATCH (n:Node {graph_id: $graph_id, id: $id})
    RETURN n[$key] AS value
    """

    SET_NODE_PROPERTY = """
    MATCH (n:Node {graph_id: $graph_id, id: $id})
    SET n += $props
    """

    CREATE_WIRE_IF_ABSENT = """
    MATCH (n1:Node {graph_id: $graph_id, id: $s})
    MATCH (n2:Node {graph_id: $graph_id, id: $t})
    WHERE NOT (n1)-[:Wire]-(n2)
    CREATE (n1)-[:Wire {t: $et}]->(n2)
    RETURN count(*) AS created
    """

    DELETE_WIRE = """
    MATCH (:Node {graph_id: $graph_id, id: $s})-[r:Wire]-(:Node {graph_id: $graph_id, id: $t})
    DELETE r
    """

    WIRE_TYPE = """
    MATCH (:Node {graph_id: $graph_id, id: $s})-[r:Wire]-(:Node {graph_id: $graph_id, id: $t})
    RETURN r.t AS t LIMIT 1
    """

    SET_WIRE_TYPE = """
    MATCH (:Node {graph_id: $graph_id, id: $s})-[r:Wire]-(:Node {graph_id: $graph_id, id: $t})
    SET r.t = $et
    """

    INCIDENT_WIRES = """
    MATCH (n:Node {graph_id: $graph_id, id: $id})-[r:Wire]-(m:Node {graph_id: $graph_id})
    RETURN m.id AS neighbor, r.t AS t
    """

    ALL_WIRES = """
    MATCH (n1:Node {graph_id: $graph_id})-[r:Wire]->(n2:Node {graph_id: $graph_id})
    RETURN n1.id AS s, n2.id AS t
    """

    COUNT_WIRES = """
    MATCH (:Node {graph_id: $graph_id})-[r:Wire]->(:Node {graph_id: $graph_id})
    RETURN count(r) AS count
    """

    COPY_NODES = """
    MATCH (n:Node {graph_id: $graph_id})
    CREATE (m:Node)
    SET m = properties(n), m.graph_id = $new_graph_id
    """

    COPY_WIRES = """
    MATCH (n1:Node {graph_id: $graph_id})-[r:Wire]->(n2:Node {graph_id: $graph_id})
    MATCH (m1:Node {graph_id: $new_graph_id, id: n1.id})
    MATCH (m2:Node {graph_id: $new_graph_id, id: n2.id})
    CREATE (m1)-[:Wire {t: r.t}]->(m2)
    """

    MAX_ROW = """
    MATCH (n:Node {graph_id: $graph_id})
    WHERE n.row IS NOT NULL AND n.row >= 0
    RETURN coalesce(max(n.row), -1) AS maxr
    """
