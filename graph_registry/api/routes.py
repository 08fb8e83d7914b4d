"""
routes.py - Graph Route Handlers
================================
Handles graph creation, shortest-path queries and deletion.
Core logic delegated to services/graph_service.py.

Handlers are plain ``def`` functions, so FastAPI runs each request on
its worker threadpool.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from fastapi.exceptions import RequestValidationError

from ..services import GraphService
from .schemas import (
    CreateGraphResponse,
    EdgeIn,
    GraphListResponse,
    GraphSummaryResponse,
    HealthResponse,
    PathQuery,
    PathResponse,
)

logger = logging.getLogger(__name__)

# ========================================
# Router Setup
# ========================================

router = APIRouter()


def get_graph_service(request: Request) -> GraphService:
    """Resolve the GraphService from the container attached to the app."""
    return request.app.state.container.resolve(GraphService)


# ========================================
# Route Handlers
# ========================================

@router.post("/graph", response_model=CreateGraphResponse)
def create_graph(
    edges: Optional[List[EdgeIn]] = Body(None),
    service: GraphService = Depends(get_graph_service),
):
    """
    Create a graph from a JSON list of ``{"u": int, "v": int}`` edges.

    A ``null`` body creates an empty graph.

    Returns:
        The identifier assigned to the new graph
    """
    graph_id = service.create_graph(edge.to_domain() for edge in edges or [])
    return CreateGraphResponse(id=graph_id)


@router.get("/graph", response_model=GraphListResponse)
def list_graphs(service: GraphService = Depends(get_graph_service)):
    """List live graph identifiers in creation order."""
    return GraphListResponse(ids=service.list_graphs())


def _endpoints(
    start: Optional[int], end: Optional[int], body: Optional[PathQuery]
) -> Tuple[int, int]:
    """Pick start/end from the query string, falling back to the JSON body."""
    if body is not None:
        start = body.start if start is None else start
        end = body.end if end is None else end

    missing = [name for name, value in (("start", start), ("end", end)) if value is None]
    if missing:
        raise RequestValidationError(
            [
                {"type": "missing", "loc": ("query", name), "msg": "Field required", "input": None}
                for name in missing
            ]
        )
    return start, end


@router.get("/graph/{graph_id}/shortest_path", response_model=PathResponse)
def shortest_path(
    graph_id: str,
    start: Optional[int] = Query(None, description="Start node"),
    end: Optional[int] = Query(None, description="End node"),
    body: Optional[PathQuery] = Body(None),
    service: GraphService = Depends(get_graph_service),
):
    """
    Find a shortest path between ``start`` and ``end``.

    The endpoints come from the query string or from a
    ``{"start": int, "end": int}`` JSON body.

    Raises:
        GraphNotFoundError: 404 if the graph does not exist
        NoPathFoundError: 404 if end is unreachable from start
    """
    start, end = _endpoints(start, end, body)
    result = service.shortest_path(graph_id, start, end)
    return PathResponse(path=list(result.path))


@router.post("/graph/{graph_id}/shortest_path", response_model=PathResponse)
def shortest_path_from_body(
    graph_id: str,
    query: PathQuery,
    service: GraphService = Depends(get_graph_service),
):
    """Same as the GET route, with ``{"start": int, "end": int}`` in the body."""
    result = service.shortest_path(graph_id, query.start, query.end)
    return PathResponse(path=list(result.path))


@router.get("/graph/{graph_id}", response_model=GraphSummaryResponse)
def describe_graph(graph_id: str, service: GraphService = Depends(get_graph_service)):
    summary = service.describe_graph(graph_id)
    return GraphSummaryResponse(
        id=summary.graph_id,
        nodes=summary.node_count,
        edges=summary.edge_count,
    )


@router.delete("/graph/{graph_id}", status_code=204)
def delete_graph(graph_id: str, service: GraphService = Depends(get_graph_service)):
    service.delete_graph(graph_id)
    return Response(status_code=204)


@router.get("/health", response_model=HealthResponse)
def health(service: GraphService = Depends(get_graph_service)):
    return HealthResponse(ok=True, graphs=service.graph_count())
