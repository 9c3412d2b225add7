"""Input file readers."""

from biofeedback.storage.reader import (
	FACIAL_COLUMNS,
	load_facial_samples,
	load_rr_intervals,
	load_waveform,
	read_table,
)

__all__ = [
	"FACIAL_COLUMNS",
	"read_table",
	"load_rr_intervals",
	"load_waveform",
	"load_facial_samples",
]
