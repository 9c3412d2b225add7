"""Session registry and global application state."""
from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from threading import Lock

from biofeedback.config import ProcessingConfig, get_config
from biofeedback.processor import BiofeedbackProcessor

logger = logging.getLogger(__name__)


class SessionLimitError(RuntimeError):
	"""Raised when the registry already holds the maximum number of sessions."""


@dataclass
class Session:
	"""One processing context plus the lock that serializes access to it."""
	id: str
	processor: BiofeedbackProcessor
	created_at: float = field(default_factory=time.time)
	lock: Lock = field(default_factory=Lock, repr=False)


class SessionRegistry:
	"""Creates, looks up and removes sessions.

	Each session owns its processor exclusively; route handlers hold
	``session.lock`` for the whole of any read or mutation.
	"""

	def __init__(self, config: ProcessingConfig | None = None, max_sessions: int = 256) -> None:
		self.config = config or ProcessingConfig()
		self.max_sessions = max_sessions
		self._sessions: dict[str, Session] = {}
		self._lock = Lock()

	def create(self, sampling_rate: float | None = None) -> Session:
		with self._lock:
			if len(self._sessions) >= self.max_sessions:
				raise SessionLimitError(f"Session limit reached ({self.max_sessions})")
			session = Session(
				id=uuid.uuid4().hex,
				processor=BiofeedbackProcessor(sampling_rate, config=self.config),
			)
			self._sessions[session.id] = session

		logger.info(f"Created session {session.id} at {session.processor.sampling_rate} Hz")
		return session

	def get(self, session_id: str) -> Session | None:
		with self._lock:
			return self._sessions.get(session_id)

	def remove(self, session_id: str) -> bool:
		with self._lock:
			removed = self._sessions.pop(session_id, None) is not None
		if removed:
			logger.info(f"Removed session {session_id}")
		return removed

	def clear(self) -> None:
		with self._lock:
			self._sessions.clear()

	def __len__(self) -> int:
		with self._lock:
			return len(self._sessions)


class AppState:
	"""Global application state container."""

	def __init__(self) -> None:
		config = get_config()
		self.sessions = SessionRegistry(config.processing, max_sessions=config.api.max_sessions)
		self.started_at = time.time()


# Global singleton
_app_state: AppState | None = None


def get_app_state() -> AppState:
	global _app_state
	if _app_state is None:
		_app_state = AppState()
	return _app_state
