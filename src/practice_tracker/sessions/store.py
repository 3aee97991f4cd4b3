"""File-backed practice session store."""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from practice_tracker.sessions.models import ErrorKind, Outcome, Session, create_session

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_MINUTES_RE = re.compile(r"\d+", re.ASCII)


@dataclass
class SkippedLine:
    lineno: int
    line: str
    kind: ErrorKind
    message: str


@dataclass
class LoadReport:
    """What happened while reading the sessions file."""

    loaded: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    error: Outcome | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(line: str) -> Outcome:
    """Parse one `YYYY-MM-DD,<minutes>` line into a Session outcome."""
    fields = line.strip().split(",")
    if len(fields) != 2:
        return Outcome.failure(
            ErrorKind.PARSE, f"expected 2 comma-separated fields, got {len(fields)}"
        )

    raw_date, raw_duration = (f.strip() for f in fields)
    if not _DATE_RE.fullmatch(raw_date):
        return Outcome.failure(ErrorKind.PARSE, f"invalid date {raw_date!r}")
    if not _MINUTES_RE.fullmatch(raw_duration):
        return Outcome.failure(ErrorKind.PARSE, f"invalid duration {raw_duration!r}")

    try:
        date = dt.date.fromisoformat(raw_date)
    except ValueError:
        return Outcome.failure(ErrorKind.PARSE, f"invalid date {raw_date!r}")
    return create_session(date, int(raw_duration))


def format_line(session: Session) -> str:
    return f"{session.date.isoformat()},{session.duration}"


class SessionStore:
    """Ordered practice sessions persisted to a plain text file.

    One line per session, `YYYY-MM-DD,<minutes>`. Sessions are kept in
    insertion order and the whole file is rewritten on every append.
    No locking: concurrent writers overwrite each other.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._sessions: list[Session] = []
        self.last_load = self.load()

    def load(self) -> LoadReport:
        """Replace in-memory sessions with the file's contents.

        Malformed lines are skipped with a warning; a missing file is an
        empty store.
        """
        self._sessions = []
        report = LoadReport()
        if not self.path.exists():
            logger.debug("No sessions file at %s", self.path)
            return report

        try:
            data = self.path.read_bytes()
        except OSError as e:
            logger.error("Cannot read sessions file %s: %s", self.path, e)
            report.error = Outcome.failure(
                ErrorKind.IO, f"Cannot read sessions file {self.path}: {e}"
            )
            return report

        # Decoded per line so one corrupt line doesn't hide the rest.
        for lineno, raw in enumerate(data.splitlines(), start=1):
            if not raw.strip():
                continue
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                line = raw.decode("utf-8", errors="replace")
                logger.warning(
                    "Skipping line %d of %s (invalid UTF-8): %r", lineno, self.path, line
                )
                report.skipped.append(SkippedLine(lineno, line, ErrorKind.PARSE, "invalid UTF-8"))
                continue
            try:
                outcome = parse_line(line)
            except Exception:
                logger.exception("Unexpected error on line %d of %s: %r", lineno, self.path, line)
                report.skipped.append(
                    SkippedLine(lineno, line, ErrorKind.PARSE, "unexpected error")
                )
                continue

            if not outcome.ok:
                logger.warning(
                    "Skipping line %d of %s (%s): %r", lineno, self.path, outcome.message, line
                )
                report.skipped.append(SkippedLine(lineno, line, outcome.kind, outcome.message))
                continue

            self._sessions.append(outcome.session)

        report.loaded = len(self._sessions)
        logger.debug(
            "Loaded %d sessions from %s (%d skipped)",
            report.loaded, self.path, len(report.skipped),
        )
        return report

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines = [format_line(s) for s in self._sessions]
        self.path.write_text("\n".join(lines) + "\n" if lines else "")

    def append(self, session: Session) -> Outcome:
        """Add a session and rewrite the file. Rolls back on write failure."""
        self._sessions.append(session)
        try:
            self._save()
        except OSError as e:
            self._sessions.pop()
            logger.error("Failed to write sessions file %s: %s", self.path, e)
            return Outcome.failure(
                ErrorKind.IO, f"Failed to write sessions file {self.path}: {e}"
            )
        logger.info("Recorded %s", session)
        return Outcome.success(session)

    def list(self) -> list[Session]:
        return list(self._sessions)

    def total_minutes(self) -> int:
        return sum(s.duration for s in self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)
