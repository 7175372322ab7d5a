"""Directed supply chain graph with BFS shortest path queries."""

from __future__ import annotations

import logging
from collections import deque

from core.event_bus import EventBus
from core.outcomes import EntityFlows, OperationResult, OutcomeStatus

logger = logging.getLogger("sc.graph")

OPERATION_EVENT = "graph.operation"


class GraphStore:
    """Adjacency-list graph of entities and their outgoing flows.

    Entities keep insertion order, and so do each entity's flows. Repeated
    ``add_flow`` calls between the same pair append parallel flows unless
    ``allow_duplicate_flows`` is disabled.
    """

    def __init__(
        self,
        allow_duplicate_flows: bool = True,
        event_bus: EventBus | None = None,
    ) -> None:
        self._flows: dict[str, list[str]] = {}
        self.allow_duplicate_flows = allow_duplicate_flows
        self.event_bus = event_bus

    def __contains__(self, entity: object) -> bool:
        return entity in self._flows

    def __len__(self) -> int:
        return len(self._flows)

    @property
    def is_empty(self) -> bool:
        return not self._flows

    def neighbors(self, entity: str) -> list[str]:
        """Return a copy of the entity's flows. Raises KeyError when missing."""
        return list(self._flows[entity])

    def add_entity(self, entity: str) -> OperationResult:
        """Add an entity with no flows."""
        if entity in self._flows:
            return self._finish("add_entity", OutcomeStatus.ALREADY_EXISTS, [entity])
        self._flows[entity] = []
        return self._finish("add_entity", OutcomeStatus.ADDED, [entity])

    def add_flow(self, source: str, target: str) -> OperationResult:
        """Append a flow from source to target; both must already exist."""
        args = [source, target]
        if source not in self._flows or target not in self._flows:
            return self._finish("add_flow", OutcomeStatus.INVALID_ENTITIES, args)
        flows = self._flows[source]
        if not self.allow_duplicate_flows and target in flows:
            return self._finish("add_flow", OutcomeStatus.FLOW_EXISTS, args)
        flows.append(target)
        return self._finish("add_flow", OutcomeStatus.FLOW_ADDED, args)

    def remove_flow(self, source: str, target: str) -> OperationResult:
        """Remove the first flow from source to target."""
        args = [source, target]
        if source not in self._flows:
            return self._finish("remove_flow", OutcomeStatus.INVALID_SOURCE, args)
        flows = self._flows[source]
        if target not in flows:
            return self._finish("remove_flow", OutcomeStatus.FLOW_NOT_FOUND, args)
        flows.remove(target)
        return self._finish("remove_flow", OutcomeStatus.FLOW_REMOVED, args)

    def remove_entity(self, entity: str) -> OperationResult:
        """Remove an entity along with every flow into it."""
        if entity not in self._flows:
            return self._finish("remove_entity", OutcomeStatus.NOT_FOUND, [entity])
        del self._flows[entity]
        for other, flows in self._flows.items():
            if entity in flows:
                self._flows[other] = [name for name in flows if name != entity]
        return self._finish("remove_entity", OutcomeStatus.REMOVED, [entity])

    def list_all(self) -> list[EntityFlows]:
        """Snapshot of every entity with its flows, in insertion order."""
        return [
            EntityFlows(entity=entity, flows_to=list(flows))
            for entity, flows in self._flows.items()
        ]

    def find_shortest_path(self, start: str, end: str) -> OperationResult:
        """Breadth-first search for the path with the fewest flows.

        The queue holds whole paths, and a node counts as visited once it is
        enqueued, so each node is expanded at most once and the first path
        that reaches ``end`` is a shortest one. Ties resolve by the order
        flows were added.
        """
        args = [start, end]
        if start not in self._flows or end not in self._flows:
            return self._finish("find_shortest_path", OutcomeStatus.INVALID_ENDPOINTS, args)

        queue: deque[list[str]] = deque([[start]])
        visited = {start}
        while queue:
            path = queue.popleft()
            last = path[-1]
            if last == end:
                return self._finish(
                    "find_shortest_path", OutcomeStatus.PATH_FOUND, args, path=path
                )
            for neighbor in self._flows[last]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append([*path, neighbor])

        return self._finish("find_shortest_path", OutcomeStatus.PATH_NOT_FOUND, args)

    def _finish(
        self,
        operation: str,
        status: OutcomeStatus,
        args: list[str],
        path: list[str] | None = None,
    ) -> OperationResult:
        result = OperationResult(operation=operation, status=status, args=args, path=path or [])
        if result.ok:
            logger.debug("%s %s -> %s", operation, args, status.value)
        else:
            logger.info("%s %s rejected: %s", operation, args, status.value)
        if self.event_bus is not None:
            self.event_bus.emit(OPERATION_EVENT, result.model_dump(mode="json"))
        return result
