"""Request and response models for the HTTP API."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ..domain.models import Edge


class EdgeIn(BaseModel):
    """One undirected edge in a create request."""
    model_config = ConfigDict(extra="ignore")

    u: StrictInt = Field(..., description="First endpoint")
    v: StrictInt = Field(..., description="Second endpoint")

    def to_domain(self) -> Edge:
        return Edge(u=self.u, v=self.v)


class PathQuery(BaseModel):
    """Endpoints of a shortest-path query sent as a JSON body."""
    start: StrictInt
    end: StrictInt


class CreateGraphResponse(BaseModel):
    id: str = Field(..., description="Identifier of the new graph")


class PathResponse(BaseModel):
    path: List[int] = Field(..., description="Nodes from start to end inclusive")


class GraphSummaryResponse(BaseModel):
    id: str
    nodes: int
    edges: int


class GraphListResponse(BaseModel):
    ids: List[str]


class HealthResponse(BaseModel):
    ok: bool
    graphs: int
