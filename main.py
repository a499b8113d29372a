"""
main.py — Graph Algorithm Service (Flask)
==========================================
JSON API over the graph core.  Drawing and page layout belong to the
client; this server only builds graphs, runs algorithms and converts
between labels and vertex indices.

Routes:
  GET  /api/algorithms         – registry listing
  POST /api/graph              – build a graph from nodes / edges / undirected
  POST /api/graph/import       – build a graph from the text encoding
  GET  /api/graph/export       – current graph in the text encoding
  POST /api/run                – run one algorithm on the current graph
  GET  /api/state              – current graph + last selections

State management:
  The current graph lives in the Flask session as LabeledGraph.to_dict().
  Each request rebuilds the core Graph from it; nothing is shared between
  users.
"""

import logging

from flask import Flask, request, jsonify, session

import config
from algorithms import list_algorithms
from engine import LabeledGraph, parse_graph_text, format_graph_text, run_algorithm
from graphcore.errors import GraphError, ImportFormatError

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> LabeledGraph:
    """Deserialise graph from session, or create default."""
    if "graph" not in session:
        session["graph"] = LabeledGraph(["A", "B"]).to_dict()
    return LabeledGraph.from_dict(session["graph"])


def save_graph(graph: LabeledGraph):
    session["graph"] = graph.to_dict()
    # selections may point at labels that no longer exist
    session.pop("source", None)
    session.pop("target", None)


def get_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["POST"])
def api_graph_create():
    data = get_body()
    try:
        g = LabeledGraph(
            labels=data.get("nodes", []),
            edges=data.get("edges", []),
            undirected=data.get("undirected", True),
        )
    except (GraphError, TypeError) as e:
        return jsonify({"error": str(e)}), 400

    save_graph(g)
    logger.info("graph created: %r", g)
    return jsonify(g.to_dict())


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data = get_body()
    text = data.get("text", "")

    try:
        g = parse_graph_text(text)
    except ImportFormatError as e:
        logger.warning("graph import rejected (line %s): %s", e.line, e)
        return jsonify({"error": str(e), "line": e.line}), 400

    save_graph(g)
    logger.info("graph imported: %r", g)
    return jsonify(g.to_dict())


@app.route("/api/graph/export")
def api_graph_export():
    try:
        text = format_graph_text(get_graph())
    except GraphError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"text": text})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data   = get_body()
    graph  = get_graph()
    source = data.get("source", session.get("source"))
    target = data.get("target", session.get("target"))

    try:
        report = run_algorithm(data.get("algorithm", ""), graph, source=source, target=target)
    except (GraphError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    session["selected_algo"] = report.algo_key
    session["source"]        = source
    session["target"]        = target
    return jsonify(report.to_dict())


# ---------------------------------------------------------------------------
# API: State
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    state = get_graph().to_dict()
    state.update({
        "source":        session.get("source"),
        "target":        session.get("target"),
        "selected_algo": session.get("selected_algo"),
    })
    return jsonify(state)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info("Graph algorithm service on http://%s:%d", config.HOST, config.PORT)
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
