"""Interactive shell tests."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from ui.cli.cli import app

runner = CliRunner()


def run_shell(tmp_path: Path, *lines: str):
    return runner.invoke(app, ["shell", "--root", str(tmp_path)], input="\n".join(lines) + "\n")


def test_shell_session_builds_graph_and_finds_path(tmp_path: Path) -> None:
    result = run_shell(
        tmp_path,
        "1", "Farm",
        "1", "Mill",
        "1", "Bakery",
        "2", "Farm", "Mill",
        "2", "Mill", "Bakery",
        "5",
        "6", "Farm", "Bakery",
        "7",
    )

    assert result.exit_code == 0
    assert "Farm added to the supply chain." in result.output
    assert "Flow added from Farm to Mill" in result.output
    assert "Supply Chain Network:" in result.output
    assert "Farm flows to: [Mill]" in result.output
    assert "Bakery flows to: []" in result.output
    assert "Shortest path from Farm to Bakery: [Farm, Mill, Bakery]" in result.output
    assert result.output.rstrip().endswith("Exiting the program...")


def test_shell_reports_rejected_operations(tmp_path: Path) -> None:
    result = run_shell(
        tmp_path,
        "5",
        "1", "Farm",
        "1", "Farm",
        "2", "Farm", "Ghost",
        "3", "Ghost", "Farm",
        "3", "Farm", "Farm",
        "4", "Ghost",
        "6", "Farm", "Ghost",
        "1", "Island",
        "6", "Farm", "Island",
        "7",
    )

    assert result.exit_code == 0
    assert "The supply chain is empty." in result.output
    assert "Farm already exists in the supply chain." in result.output
    assert "Invalid entities." in result.output
    assert "Invalid source entity." in result.output
    assert "No flow exists from Farm to Farm" in result.output
    assert "Ghost not found in the supply chain." in result.output
    assert "Invalid start or end entity." in result.output
    assert "No path found from Farm to Island" in result.output


def test_shell_reprompts_on_invalid_choice(tmp_path: Path) -> None:
    result = run_shell(tmp_path, "9", "abc", "7")

    assert result.exit_code == 0
    assert result.output.count("Invalid option. Please choose a valid option.") == 2
    assert result.output.count("Welcome to the Dynamic Supply Chain System") == 3


def test_shell_ends_cleanly_at_end_of_input(tmp_path: Path) -> None:
    result = run_shell(tmp_path, "1", "Farm")

    assert result.exit_code == 0
    assert "Farm added to the supply chain." in result.output


def test_shell_writes_audit_trail(tmp_path: Path) -> None:
    run_shell(tmp_path, "1", "Farm", "4", "Mill", "7")

    lines = (tmp_path / "logs" / "audit.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line) for line in lines]
    assert [(e["operation"], e["status"], e["ok"]) for e in events] == [
        ("add_entity", "added", True),
        ("remove_entity", "not_found", False),
    ]


def test_config_show_prints_merged_config(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "graph:\n  allow_duplicate_flows: false\n", encoding="utf-8"
    )

    result = runner.invoke(app, ["config", "show", "--root", str(tmp_path)])

    assert result.exit_code == 0
    config = json.loads(result.output)
    assert config["graph"]["allow_duplicate_flows"] is False
    assert config["logging"]["level"] == "INFO"
