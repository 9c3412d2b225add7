"""Command-line interface."""

from __future__ import annotations

import sys

import click
import structlog
from rich.console import Console
from rich.table import Table

from biofeedback.errors import BiofeedbackError

structlog.configure(
	processors=[
		structlog.stdlib.add_log_level,
		structlog.processors.TimeStamper(fmt="iso"),
		structlog.dev.ConsoleRenderer(),
	],
	wrapper_class=structlog.stdlib.BoundLogger,
	context_class=dict,
	logger_factory=structlog.PrintLoggerFactory(),
)

logger = structlog.get_logger(__name__)
console = Console()


def _fail(message: str) -> None:
	console.print(f"[red]Error: {message}[/]")
	sys.exit(1)


@click.group()
@click.version_option(package_name="biofeedback")
def main() -> None:
	"""Biofeedback - HRV, respiration and facial tension metrics."""
	pass


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--column", default=None, help="Column holding RR intervals (default: first)")
def hrv(path: str, column: str | None) -> None:
	"""Compute HRV metrics from a file of RR intervals (ms)."""
	from biofeedback.processor import compute_hrv_metrics
	from biofeedback.storage import load_rr_intervals
	from biofeedback.vitals.scores import stress_index, stress_level

	try:
		intervals = load_rr_intervals(path, column)
		metrics = compute_hrv_metrics(intervals)
	except (BiofeedbackError, KeyError, ValueError) as e:
		_fail(str(e))
		return

	index = stress_index(metrics)

	t = Table(title="Heart Rate Variability")
	t.add_column("Metric", style="cyan")
	t.add_column("Value", style="green")
	t.add_row("RR Intervals", str(len(intervals)))
	t.add_row("RMSSD", f"{metrics.rmssd:.2f} ms")
	t.add_row("SDNN", f"{metrics.sdnn:.2f} ms")
	t.add_row("pNN50", f"{metrics.pnn50:.1f}%")
	t.add_row("Stress Index", f"{index:.0f}/100 ({stress_level(index)})")
	console.print(t)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-r", "--rate", "sampling_rate", type=float, default=30.0, show_default=True, help="Sampling rate (Hz)")
@click.option("--column", default=None, help="Column holding the waveform (default: first)")
def resp(path: str, sampling_rate: float, column: str | None) -> None:
	"""Estimate respiratory rate from a raw PPG-like waveform."""
	from biofeedback.processor import BiofeedbackProcessor
	from biofeedback.storage import load_waveform

	try:
		signal = load_waveform(path, column)
		result = BiofeedbackProcessor(sampling_rate).compute_resp_details(signal)
	except (BiofeedbackError, KeyError, ValueError) as e:
		_fail(str(e))
		return

	t = Table(title="Respiration")
	t.add_column("Metric", style="cyan")
	t.add_column("Value", style="green")
	t.add_row("Samples", str(len(signal)))
	t.add_row("Duration", f"{len(signal) / sampling_rate:.1f} s")
	t.add_row("Peaks", str(result.breath_count))
	t.add_row("Respiratory Rate", f"{result.rate_bpm:.1f} breaths/min")
	console.print(t)


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("-r", "--rate", "sampling_rate", type=float, default=30.0, show_default=True, help="Sampling rate (Hz)")
def facial(path: str, sampling_rate: float) -> None:
	"""Compute facial metrics from a table of facial samples."""
	from biofeedback.processor import BiofeedbackProcessor
	from biofeedback.storage import load_facial_samples
	from biofeedback.vitals.scores import facial_levels, relaxation_level, relaxation_score

	try:
		samples = load_facial_samples(path)
		processor = BiofeedbackProcessor(sampling_rate)
		for row in samples.itertuples(index=False):
			processor.add_facial_data(row.muscle_tension, row.eye_movement, row.blink_rate, row.facial_symmetry)
		metrics = processor.compute_facial_metrics()
	except (BiofeedbackError, KeyError, ValueError) as e:
		_fail(str(e))
		return

	smoothed = processor.smoothed_facial_sample()
	levels = facial_levels(smoothed)
	score = relaxation_score(smoothed)

	t = Table(title="Facial Metrics")
	t.add_column("Metric", style="cyan")
	t.add_column("Value", style="green")
	t.add_column("Level", style="yellow")
	t.add_row("Samples Used", str(len(processor.facial_channels)), "---")
	t.add_row("Muscle Tension", f"{metrics.mean_tension:.3f}", levels["muscle_tension"])
	t.add_row("Tension Variability", f"{metrics.tension_variability:.3f}", "---")
	t.add_row("Eye Movement", f"{metrics.mean_eye_movement:.3f}", levels["eye_movement"])
	t.add_row("Eye Movement Frequency", f"{metrics.eye_movement_frequency:.2f} Hz", "---")
	t.add_row("Blink Rate", f"{metrics.mean_blink_rate:.3f}", levels["blink_rate"])
	t.add_row("Symmetry", f"{metrics.mean_symmetry:.3f}", levels["facial_symmetry"])
	t.add_row("Relaxation", f"{score}%", relaxation_level(score))
	console.print(t)


@main.group()
def patterns() -> None:
	"""Browse guided breathing patterns."""
	pass


@patterns.command("list")
def patterns_list() -> None:
	"""List available breathing patterns."""
	from biofeedback.breathing import BREATHING_PATTERNS

	t = Table(title="Breathing Patterns")
	t.add_column("ID", style="cyan")
	t.add_column("Name", style="green")
	t.add_column("Difficulty")
	t.add_column("Cycle", style="dim")
	t.add_column("Breaths/min", style="dim")

	for p in BREATHING_PATTERNS:
		t.add_row(p.id, p.name, p.difficulty, f"{p.cycle_seconds:.0f} s", f"{p.breaths_per_minute:.1f}")

	console.print(t)


@patterns.command("show")
@click.argument("pattern_id")
def patterns_show(pattern_id: str) -> None:
	"""Show the phases of a breathing pattern."""
	from biofeedback.breathing import BREATHING_PATTERNS, get_breathing_pattern

	pattern = get_breathing_pattern(pattern_id)
	if pattern is None:
		console.print(f"[red]Pattern not found: {pattern_id}[/]")
		console.print(f"Available: {', '.join(p.id for p in BREATHING_PATTERNS)}")
		sys.exit(1)

	console.print(f"[bold cyan]{pattern.name}[/] ({pattern.difficulty})")
	console.print(pattern.description)
	console.print(f"[dim]Origin: {pattern.cultural_origin}[/]\n")

	t = Table()
	t.add_column("Phase", style="cyan")
	t.add_column("Seconds", style="green")
	t.add_column("Instruction")
	for phase in pattern.phases:
		t.add_row(phase.name, f"{phase.duration:g}", phase.instruction)
	console.print(t)

	if pattern.benefits:
		console.print(f"Benefits: {', '.join(pattern.benefits)}")


if __name__ == "__main__":
	main()
