"""Guided breathing patterns offered during a session."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

INHALE_COLOR = "#4CAF50"
HOLD_COLOR = "#FF9800"
EXHALE_COLOR = "#F44336"
REST_COLOR = "#9C27B0"


@dataclass(frozen=True)
class BreathingPhase:
	name: str
	duration: float  # seconds
	instruction: str
	color: str


@dataclass(frozen=True)
class BreathingPattern:
	id: str
	name: str
	description: str
	cultural_origin: str
	difficulty: str  # beginner, intermediate, advanced
	phases: tuple[BreathingPhase, ...]
	benefits: tuple[str, ...] = field(default_factory=tuple)

	@property
	def cycle_seconds(self) -> float:
		return sum(phase.duration for phase in self.phases)

	@property
	def breaths_per_minute(self) -> float:
		"""Target breathing rate, counting one breath per inhale phase."""
		inhales = sum(1 for phase in self.phases if phase.name.startswith("inhale"))
		return 60.0 * inhales / self.cycle_seconds

	def to_dict(self) -> dict[str, Any]:
		data = asdict(self)
		data["phases"] = [asdict(p) for p in self.phases]
		data["benefits"] = list(self.benefits)
		data["cycle_seconds"] = self.cycle_seconds
		data["breaths_per_minute"] = self.breaths_per_minute
		return data


def _phase(name: str, duration: float, instruction: str, color: str) -> BreathingPhase:
	return BreathingPhase(name=name, duration=duration, instruction=instruction, color=color)


BREATHING_PATTERNS: tuple[BreathingPattern, ...] = (
	BreathingPattern(
		id="box-breathing",
		name="Box Breathing",
		description="A calming technique used by Navy SEALs and yogis for stress reduction and focus.",
		cultural_origin="Ancient Indian Pranayama",
		difficulty="beginner",
		benefits=("Reduces stress", "Improves focus", "Calms nervous system"),
		phases=(
			_phase("inhale", 4, "Breathe in slowly through your nose", INHALE_COLOR),
			_phase("hold", 4, "Hold the breath gently", HOLD_COLOR),
			_phase("exhale", 4, "Release the breath slowly", EXHALE_COLOR),
			_phase("hold-empty", 4, "Rest in the empty space", REST_COLOR),
		),
	),
	BreathingPattern(
		id="4-7-8-breathing",
		name="4-7-8 Breathing",
		description="A natural tranquilizer for the nervous system, promoting deep relaxation.",
		cultural_origin="Dr. Andrew Weil (based on ancient yogic techniques)",
		difficulty="beginner",
		benefits=("Induces sleep", "Reduces anxiety", "Manages cravings"),
		phases=(
			_phase("inhale", 4, "Inhale quietly through your nose", INHALE_COLOR),
			_phase("hold", 7, "Hold your breath", HOLD_COLOR),
			_phase("exhale", 8, "Exhale completely through your mouth", EXHALE_COLOR),
		),
	),
	BreathingPattern(
		id="alternate-nostril",
		name="Alternate Nostril Breathing",
		description="Balances the left and right hemispheres of the brain, promoting mental clarity.",
		cultural_origin="Ancient Indian Pranayama (Nadi Shodhana)",
		difficulty="intermediate",
		benefits=("Balances energy", "Improves concentration", "Reduces mental fatigue"),
		phases=(
			_phase("inhale-left", 4, "Inhale through left nostril", INHALE_COLOR),
			_phase("hold", 4, "Hold breath", HOLD_COLOR),
			_phase("exhale-right", 4, "Exhale through right nostril", EXHALE_COLOR),
			_phase("inhale-right", 4, "Inhale through right nostril", INHALE_COLOR),
			_phase("hold", 4, "Hold breath", HOLD_COLOR),
			_phase("exhale-left", 4, "Exhale through left nostril", EXHALE_COLOR),
		),
	),
	BreathingPattern(
		id="ocean-breath",
		name="Ocean Breath",
		description="Creates a soothing sound like ocean waves, calming the mind and body.",
		cultural_origin="Ancient Indian Pranayama (Ujjayi)",
		difficulty="intermediate",
		benefits=("Calms mind", "Reduces stress", "Improves focus"),
		phases=(
			_phase("inhale", 5, "Inhale with gentle throat constriction", INHALE_COLOR),
			_phase("exhale", 5, "Exhale with ocean-like sound", EXHALE_COLOR),
		),
	),
	BreathingPattern(
		id="triangle-breathing",
		name="Triangle Breathing",
		description="A simple pattern that creates a sense of stability and grounding.",
		cultural_origin="Modern meditation (inspired by ancient practices)",
		difficulty="beginner",
		benefits=("Grounding", "Stability", "Stress reduction"),
		phases=(
			_phase("inhale", 3, "Inhale slowly and steadily", INHALE_COLOR),
			_phase("hold", 3, "Hold with awareness", HOLD_COLOR),
			_phase("exhale", 3, "Release completely", EXHALE_COLOR),
		),
	),
	BreathingPattern(
		id="square-breathing",
		name="Square Breathing",
		description="Creates a balanced, square pattern that promotes mental clarity and emotional stability.",
		cultural_origin="Modern stress management (inspired by ancient techniques)",
		difficulty="beginner",
		benefits=("Mental clarity", "Emotional balance", "Stress reduction"),
		phases=(
			_phase("inhale", 4, "Inhale to fill your lungs", INHALE_COLOR),
			_phase("hold-full", 4, "Hold with full lungs", HOLD_COLOR),
			_phase("exhale", 4, "Exhale completely", EXHALE_COLOR),
			_phase("hold-empty", 4, "Hold with empty lungs", REST_COLOR),
		),
	),
)


def get_breathing_pattern(pattern_id: str) -> BreathingPattern | None:
	return next((p for p in BREATHING_PATTERNS if p.id == pattern_id), None)


def get_default_pattern() -> BreathingPattern:
	return BREATHING_PATTERNS[0]
