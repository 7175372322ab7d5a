"""Outcome models returned by graph operations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class OutcomeStatus(str, Enum):
    """Every expected outcome of a graph operation."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FLOW_ADDED = "flow_added"
    FLOW_EXISTS = "flow_exists"
    FLOW_REMOVED = "flow_removed"
    FLOW_NOT_FOUND = "flow_not_found"
    INVALID_ENTITIES = "invalid_entities"
    INVALID_SOURCE = "invalid_source"
    INVALID_ENDPOINTS = "invalid_endpoints"
    PATH_FOUND = "path_found"
    PATH_NOT_FOUND = "path_not_found"


SUCCESS_STATUSES = frozenset(
    {
        OutcomeStatus.ADDED,
        OutcomeStatus.REMOVED,
        OutcomeStatus.FLOW_ADDED,
        OutcomeStatus.FLOW_REMOVED,
        OutcomeStatus.PATH_FOUND,
    }
)


class OperationResult(BaseModel):
    """Outcome of one graph operation, rendered by the caller."""

    operation: str
    status: OutcomeStatus
    args: list[str] = Field(default_factory=list)
    path: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in SUCCESS_STATUSES


class EntityFlows(BaseModel):
    """Listing row: one entity and its outgoing flows."""

    entity: str
    flows_to: list[str] = Field(default_factory=list)
