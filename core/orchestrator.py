"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.audit_logger import AuditLogger
from core.event_bus import EventBus
from core.graph_store import OPERATION_EVENT, GraphStore
from core.policy_runtime import configure_logging, load_effective_config, resolve_audit_log_path


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    graph: GraphStore
    event_bus: EventBus
    audit_logger: AuditLogger | None


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        configure_logging(config)

        event_bus = EventBus()
        audit_logger = None
        if config.get("audit", {}).get("enabled", True):
            audit_logger = AuditLogger(resolve_audit_log_path(self.root, config))
            event_bus.subscribe(OPERATION_EVENT, audit_logger.record)

        graph = GraphStore(
            allow_duplicate_flows=bool(
                config.get("graph", {}).get("allow_duplicate_flows", True)
            ),
            event_bus=event_bus,
        )
        return RuntimeBundle(
            config=config,
            graph=graph,
            event_bus=event_bus,
            audit_logger=audit_logger,
        )
