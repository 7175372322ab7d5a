"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from core.graph_store import GraphStore
from core.orchestrator import Orchestrator, RuntimeBundle
from core.outcomes import EntityFlows, OperationResult, OutcomeStatus

MENU = """
Welcome to the Dynamic Supply Chain System
1. Add an Entity
2. Add a Flow
3. Remove a Flow
4. Remove an Entity
5. Display Supply Chain
6. Find Shortest Path
7. Exit"""

EXIT_CHOICE = 7

MESSAGES: dict[OutcomeStatus, str] = {
    OutcomeStatus.ADDED: "{0} added to the supply chain.",
    OutcomeStatus.ALREADY_EXISTS: "{0} already exists in the supply chain.",
    OutcomeStatus.REMOVED: "{0} removed from the supply chain.",
    OutcomeStatus.NOT_FOUND: "{0} not found in the supply chain.",
    OutcomeStatus.FLOW_ADDED: "Flow added from {0} to {1}",
    OutcomeStatus.FLOW_EXISTS: "Flow already exists from {0} to {1}",
    OutcomeStatus.FLOW_REMOVED: "Flow removed from {0} to {1}",
    OutcomeStatus.FLOW_NOT_FOUND: "No flow exists from {0} to {1}",
    OutcomeStatus.INVALID_ENTITIES: "Invalid entities.",
    OutcomeStatus.INVALID_SOURCE: "Invalid source entity.",
    OutcomeStatus.INVALID_ENDPOINTS: "Invalid start or end entity.",
    OutcomeStatus.PATH_NOT_FOUND: "No path found from {0} to {1}",
}


def _runtime(root: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=root).build()
    return bundle


def format_names(names: list[str]) -> str:
    return "[" + ", ".join(names) + "]"


def render_result(result: OperationResult) -> str:
    """Human-readable line for an operation outcome."""
    if result.status is OutcomeStatus.PATH_FOUND:
        start, end = result.args
        return f"Shortest path from {start} to {end}: {format_names(result.path)}"
    return MESSAGES[result.status].format(*result.args)


def render_listing(rows: list[EntityFlows]) -> str:
    if not rows:
        return "The supply chain is empty."
    lines = ["Supply Chain Network:"]
    lines.extend(f"{row.entity} flows to: {format_names(row.flows_to)}" for row in rows)
    return "\n".join(lines)


def _read_choice() -> int | None:
    raw = typer.prompt("Choose an option (1/2/3/4/5/6/7)")
    try:
        return int(raw.strip())
    except ValueError:
        return None


def handle_choice(graph: GraphStore, choice: int | None) -> bool:
    """Run one menu selection. Returns False when the session should end."""
    if choice == 1:
        entity = typer.prompt("Enter entity name to add")
        typer.echo(render_result(graph.add_entity(entity)))
    elif choice == 2:
        source = typer.prompt("Enter the source entity")
        target = typer.prompt("Enter the destination entity")
        typer.echo(render_result(graph.add_flow(source, target)))
    elif choice == 3:
        source = typer.prompt("Enter the source entity")
        target = typer.prompt("Enter the destination entity")
        typer.echo(render_result(graph.remove_flow(source, target)))
    elif choice == 4:
        entity = typer.prompt("Enter entity name to remove")
        typer.echo(render_result(graph.remove_entity(entity)))
    elif choice == 5:
        typer.echo(render_listing(graph.list_all()))
    elif choice == 6:
        start = typer.prompt("Enter start entity")
        end = typer.prompt("Enter end entity")
        typer.echo(render_result(graph.find_shortest_path(start, end)))
    elif choice == EXIT_CHOICE:
        typer.echo("Exiting the program...")
        return False
    else:
        typer.echo("Invalid option. Please choose a valid option.")
    return True


def shell(root: Path | None = None) -> None:
    """Run the interactive menu loop until exit or end of input."""
    bundle = _runtime(root)
    try:
        while True:
            typer.echo(MENU)
            if not handle_choice(bundle.graph, _read_choice()):
                break
    except typer.Abort:
        typer.echo("")


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(root)
    typer.echo(json.dumps(bundle.config, indent=2))
