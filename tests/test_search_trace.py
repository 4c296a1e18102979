import json
import math

from search_trace import PathResult, SearchStats, Step, reconstruct_path


def test_reconstruct_path_walks_back_to_source():
    prev = {"A": None, "B": "A", "C": "B"}
    dist = {"A": 0.0, "B": 1.0, "C": 2.0}

    assert reconstruct_path(prev, dist, "A", "C") == ("A", "B", "C")
    assert reconstruct_path(prev, dist, "A", "A") == ("A",)


def test_reconstruct_path_empty_when_unreached():
    prev = {"A": None, "B": "A", "C": None}
    dist = {"A": 0.0, "B": 1.0, "C": math.inf}

    assert reconstruct_path(prev, dist, "A", "C") == ()


def test_reconstruct_path_empty_when_chain_misses_source():
    # Distance is finite but the chain ends at B, not A
    prev = {"A": None, "B": None, "C": "B"}
    dist = {"A": 0.0, "B": 1.0, "C": 2.0}

    assert reconstruct_path(prev, dist, "A", "C") == ()


def test_step_distance_reads_its_own_node():
    step = Step("B", {"A": 0.0, "B": 3.0})
    assert step.distance == 3.0


def test_to_dict_is_json_safe():
    result = PathResult(
        source="A",
        target="C",
        path=(),
        distances={"A": 0.0, "B": 2.0, "C": math.inf},
        predecessors={"A": None, "B": "A", "C": None},
        steps=(Step("A", {"A": 0.0, "B": math.inf, "C": math.inf}),),
        stats=SearchStats(selected=1, edges_examined=1, relaxed=1),
    )

    data = result.to_dict()

    assert data["cost"] is None
    assert data["distances"] == {"A": 0.0, "B": 2.0, "C": None}
    assert data["steps"] == [{"node_id": "A", "distances": {"A": 0.0, "B": None, "C": None}}]
    assert data["stats"] == {"selected": 1, "edges_examined": 1, "relaxed": 1}
    # No Infinity tokens in the serialized form
    assert "Infinity" not in json.dumps(data)
    assert not result.reachable
