"""Sample buffers owned by a processing context."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

FACIAL_HISTORY_SIZE = 100


class ChannelBuffer:
	"""Fixed-capacity FIFO history for one telemetry channel.

	Pushing past capacity drops the oldest sample, so the buffer always
	holds the most recent ``capacity`` values in arrival order.
	"""

	def __init__(self, capacity: int = FACIAL_HISTORY_SIZE) -> None:
		if capacity < 1:
			raise ValueError(f"capacity ({capacity}) must be >= 1")
		self._values: deque[float] = deque(maxlen=capacity)

	def push(self, value: float) -> None:
		self._values.append(float(value))

	def values(self) -> tuple[float, ...]:
		"""Current contents, oldest first."""
		return tuple(self._values)

	def as_array(self) -> NDArray[np.float64]:
		return np.fromiter(self._values, dtype=np.float64, count=len(self._values))

	def clear(self) -> None:
		self._values.clear()

	@property
	def capacity(self) -> int:
		return self._values.maxlen or 0

	def __len__(self) -> int:
		return len(self._values)


class RRIntervalStore:
	"""Unbounded, append-only series of RR intervals in milliseconds."""

	def __init__(self) -> None:
		self._intervals: list[float] = []

	def add(self, values: Iterable[float]) -> None:
		self._intervals.extend(float(v) for v in values)

	def clear(self) -> None:
		self._intervals.clear()

	def values(self) -> tuple[float, ...]:
		return tuple(self._intervals)

	def as_array(self) -> NDArray[np.float64]:
		return np.asarray(self._intervals, dtype=np.float64)

	def __len__(self) -> int:
		return len(self._intervals)


@dataclass(frozen=True)
class FacialSample:
	muscle_tension: float
	eye_movement: float
	blink_rate: float
	facial_symmetry: float


class FacialChannels:
	"""The four facial telemetry histories, always updated together.

	``add`` is the only mutator and pushes one value into every channel,
	so all four buffers share one length.
	"""

	def __init__(self, capacity: int = FACIAL_HISTORY_SIZE) -> None:
		self.muscle_tension = ChannelBuffer(capacity)
		self.eye_movement = ChannelBuffer(capacity)
		self.blink_rate = ChannelBuffer(capacity)
		self.facial_symmetry = ChannelBuffer(capacity)

	def add(self, sample: FacialSample) -> None:
		self.muscle_tension.push(sample.muscle_tension)
		self.eye_movement.push(sample.eye_movement)
		self.blink_rate.push(sample.blink_rate)
		self.facial_symmetry.push(sample.facial_symmetry)

	def clear(self) -> None:
		for channel in self.channels():
			channel.clear()

	def channels(self) -> tuple[ChannelBuffer, ChannelBuffer, ChannelBuffer, ChannelBuffer]:
		return (self.muscle_tension, self.eye_movement, self.blink_rate, self.facial_symmetry)

	def latest(self) -> FacialSample | None:
		if len(self) == 0:
			return None
		return FacialSample(*(channel.values()[-1] for channel in self.channels()))

	def __len__(self) -> int:
		return len(self.muscle_tension)
