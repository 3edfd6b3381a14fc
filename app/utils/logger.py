import json
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Any
from app.config import settings
from pathlib import Path

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_dir: str = None, level: str = None) -> logging.Logger:
    """Send diagnostics to a file so the interactive console stays clean."""
    log_path = Path(log_dir or settings.log_dir)
    problem = None
    try:
        log_path.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path / "roster.log", encoding="utf-8")
    except OSError as e:
        problem = e
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        handlers=[handler],
        force=True
    )
    if problem is not None:
        log.warning("Cannot write logs to %s, using stderr: %s", log_path, problem)
    return logging.getLogger("app")


class ActivityLogger:
    """Append-only JSONL trail of roster mutations."""

    def __init__(self, log_dir: str = None, enabled: bool = None):
        self.log_dir = Path(log_dir or settings.log_dir)
        self.enabled = settings.activity_log if enabled is None else enabled
        self.log_file = self.log_dir / "activity.jsonl"

    def log_activity(
        self,
        action: str,
        position: int,
        student: Dict[str, Any],
        roster_size: int
    ):
        """Record one mutation. The roster is already saved, so write errors are only reported."""
        if not self.enabled:
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "position": position,
            "student": student,
            "roster_size": roster_size
        }

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
        except OSError as e:
            log.warning("Could not record %s activity in %s: %s", action, self.log_file, e)


# Global logger instance
activity_logger = ActivityLogger()
