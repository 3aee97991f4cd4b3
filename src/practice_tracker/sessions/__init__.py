"""Practice session records and their file-backed store."""

from practice_tracker.sessions.models import ErrorKind, Outcome, Session, create_session
from practice_tracker.sessions.store import LoadReport, SessionStore, SkippedLine

__all__ = [
    "ErrorKind",
    "Outcome",
    "Session",
    "create_session",
    "LoadReport",
    "SessionStore",
    "SkippedLine",
]
