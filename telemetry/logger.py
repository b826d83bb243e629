from __future__ import annotations

import json
import os
import threading
import time
from typing import Any, Dict, List, Optional, TextIO


class TelemetryLogger:
    """Append-only JSONL log of rover commands and their outcomes.

    One JSON object per line. Writes are serialized with a lock so the
    logger can be shared with a UI thread.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_record(self, record: Dict[str, Any]) -> None:
        """Append a single record, stamped with wall-clock time."""
        if self._fp is None:
            return
        payload = {"t": time.time(), **record}
        line = json.dumps(payload, separators=(",", ":"))
        with self._lock:
            self._fp.write(line + "\n")
            self._fp.flush()

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def read_records(path: str) -> List[Dict[str, Any]]:
    """Load all well-formed records from a telemetry file; partial lines are skipped."""
    if not os.path.exists(path):
        return []
    records: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return records
