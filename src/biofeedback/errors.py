"""Errors raised when buffered data cannot support a computation."""

from __future__ import annotations


class BiofeedbackError(Exception):
	"""Base class for precondition failures in metric computation.

	Attributes:
		count: How many items (intervals, samples, peaks) were available.
		required: The minimum needed for the computation.
	"""

	default_message = "Biofeedback computation failed"

	def __init__(self, count: int = 0, required: int = 0, message: str | None = None) -> None:
		self.count = count
		self.required = required
		super().__init__(message or self.default_message)


class InsufficientDataError(BiofeedbackError):
	default_message = "Need at least 2 RR intervals for HRV calculation"


class SignalTooShortError(BiofeedbackError):
	default_message = "Signal too short for respiratory rate calculation"


class InsufficientPeaksError(BiofeedbackError):
	default_message = "Not enough respiratory peaks detected"


class NoFacialDataError(BiofeedbackError):
	default_message = "No facial data available"
