"""JSONL audit trail of graph operations."""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from core.outcomes import SUCCESS_STATUSES

_OK_STATUSES = frozenset(status.value for status in SUCCESS_STATUSES)


class AuditLogger:
    """Appends one JSON line per graph operation outcome."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("sc.audit")

    @staticmethod
    def _hash_args(args: list[str]) -> str:
        payload = json.dumps(args, ensure_ascii=False).encode("utf-8")
        return hashlib.sha256(payload).hexdigest()

    def record(self, event: dict[str, Any]) -> None:
        """Event bus handler for ``graph.operation`` payloads."""
        self.log(
            operation=str(event.get("operation", "")),
            args=list(event.get("args", [])),
            status=str(event.get("status", "")),
            ok=event.get("status") in _OK_STATUSES,
        )

    def log(self, operation: str, args: list[str], status: str, ok: bool) -> None:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "operation": operation,
            "args_hash": self._hash_args(args),
            "status": status,
            "ok": ok,
        }
        line = json.dumps(entry, ensure_ascii=True)
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
        self.logger.info(line)
