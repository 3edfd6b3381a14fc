import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from app.config import settings
from app.exceptions import RosterPersistError
from app.models.student import Roster, Student

log = logging.getLogger(__name__)


class RosterStore:
    """JSON file holding the whole roster as one array."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.data_file)

    def load(self) -> List[Student]:
        """Read the roster, falling back to an empty one on any failure."""
        if not self.path.exists():
            log.debug("No roster file at %s, starting empty", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Roster.model_validate({"students": data}).students
        except (OSError, ValueError, RecursionError, ValidationError) as e:
            log.warning("Ignoring unreadable roster file %s: %s", self.path, e)
            return []

    def save(self, students: List[Student]) -> None:
        """Overwrite the file with the full roster."""
        payload = [student.to_json() for student in students]
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False, indent=2))
        except OSError as e:
            log.error("Failed to save roster to %s: %s", self.path, e)
            raise RosterPersistError(str(self.path), e) from e
        log.info("Saved %d students to %s", len(students), self.path)
