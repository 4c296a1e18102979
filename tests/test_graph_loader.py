from pathlib import Path

import pytest

from dijkstra_engine import SimpleDijkstraEngine
from errors import GraphValidationError
from graph_loader import load_graph, parse_graph
from nodes import Traffic

CITY_YML = Path(__file__).resolve().parent.parent / "graphs" / "city.yml"


def test_bundled_city_graph_matches_fixture(city_graph):
    g = load_graph(CITY_YML)

    assert g.node_ids() == city_graph.node_ids()
    assert [g.label(n) for n in g.node_ids()] == [city_graph.label(n) for n in city_graph.node_ids()]
    assert set(g.edges()) == set(city_graph.edges())
    assert g.edge_between("2", "4").traffic is Traffic.HIGH


def test_load_graph_from_file(tmp_path: Path):
    cfg = tmp_path / "tiny.yml"
    cfg.write_text(
        """
nodes:
  - id: 1
    label: Depot
  - id: 2
  - id: 3
edges:
  - source: 1
    target: 2
    weight: 1.5
  - source: 2
    target: 3
    weight: 2
    traffic: HIGH
"""
    )

    g = load_graph(cfg)

    assert g.node_ids() == ["1", "2", "3"]
    assert g.label("1") == "Depot"
    assert g.label("2") == "2"
    assert g.edge_between("3", "2").traffic is Traffic.HIGH
    result = SimpleDijkstraEngine().compute_shortest_path(g, "1", "3")
    assert result.path == ("1", "2", "3")
    assert result.cost == 3.5


def test_graph_without_edges():
    g = parse_graph({"nodes": [{"id": "a"}, {"id": "b"}]})
    assert g.node_ids() == ["a", "b"]
    assert list(g.edges()) == []


@pytest.mark.parametrize(
    "doc, message",
    [
        ([], "mapping"),
        ({"edges": []}, "missing 'nodes'"),
        ({"nodes": {"id": "a"}}, "must be lists"),
        ({"nodes": [{"label": "x"}]}, r"nodes\[0\]"),
        ({"nodes": [{"id": "a"}, {"id": None}]}, r"nodes\[1\]: .*got None"),
        ({"nodes": [{"id": 1.5}]}, r"nodes\[0\]: "),
        ({"nodes": [{"id": ""}]}, r"nodes\[0\]: .*empty"),
        ({"nodes": [{"id": "a", "label": "Park"}, {"id": "a", "label": "Mall"}]}, r"nodes\[1\]: .*already exists"),
        ({"nodes": [{"id": "a"}], "edges": [{"source": "a", "target": "b"}]}, "missing weight"),
        (
            {"nodes": [{"id": "a"}, {"id": "b"}], "edges": [{"source": "a", "target": "c", "weight": 1}]},
            r"edges\[0\]: .*unknown node 'c'",
        ),
        (
            {"nodes": [{"id": "a"}, {"id": "b"}], "edges": [{"source": "a", "target": "b", "weight": -2}]},
            "non-negative",
        ),
        (
            {
                "nodes": [{"id": "a"}, {"id": "b"}],
                "edges": [{"source": "a", "target": "b", "weight": 1, "traffic": "gridlock"}],
            },
            "unknown traffic level",
        ),
    ],
)
def test_invalid_documents_are_rejected(doc, message):
    with pytest.raises(GraphValidationError, match=message):
        parse_graph(doc)


def test_invalid_yaml_is_rejected(tmp_path: Path):
    cfg = tmp_path / "broken.yml"
    cfg.write_text("nodes: [unclosed\n")

    with pytest.raises(GraphValidationError, match="not valid YAML"):
        load_graph(cfg)
