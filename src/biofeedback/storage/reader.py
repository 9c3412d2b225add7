"""Readers for RR interval, waveform and facial sample files."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pandas as pd
import structlog
from numpy.typing import NDArray

logger = structlog.get_logger(__name__)

FACIAL_COLUMNS = ("muscle_tension", "eye_movement", "blink_rate", "facial_symmetry")
SUPPORTED_SUFFIXES = (".csv", ".txt", ".json", ".parquet", ".pq")


def read_table(path: str | Path) -> pd.DataFrame:
	"""Load a file into a DataFrame. Supports CSV, plain text, JSON and Parquet.

	Plain text files hold one value per line with no header. JSON may be a
	list of numbers, a list of records, or an object of equal-length columns.
	"""
	path = Path(path)
	if not path.exists():
		raise FileNotFoundError(f"Not found: {path}")

	suffix = path.suffix.lower()
	if suffix not in SUPPORTED_SUFFIXES:
		raise ValueError(f"Unsupported format: {path.suffix}")

	if suffix == ".csv":
		df = pd.read_csv(path)
	elif suffix == ".txt":
		df = pd.read_csv(path, header=None, names=["value"], sep=r"\s+")
	elif suffix == ".json":
		with open(path) as f:
			data = json.load(f)
		if isinstance(data, list) and data and not isinstance(data[0], dict):
			df = pd.DataFrame({"value": data})
		else:
			df = pd.DataFrame(data)
	else:
		df = pd.read_parquet(path)

	logger.debug("table_loaded", path=str(path), rows=len(df), columns=list(df.columns))
	return df


def _column(df: pd.DataFrame, column: str | None) -> NDArray[np.float64]:
	if column is None:
		series = df.iloc[:, 0]
	elif column in df.columns:
		series = df[column]
	else:
		raise KeyError(f"Column not found: {column} (available: {', '.join(map(str, df.columns))})")
	return series.dropna().to_numpy(dtype=np.float64)


def load_rr_intervals(path: str | Path, column: str | None = None) -> NDArray[np.float64]:
	"""RR intervals in milliseconds, from ``column`` or the first column."""
	return _column(read_table(path), column)


def load_waveform(path: str | Path, column: str | None = None) -> NDArray[np.float64]:
	"""Raw waveform samples, from ``column`` or the first column."""
	return _column(read_table(path), column)


def load_facial_samples(path: str | Path) -> pd.DataFrame:
	"""Facial samples with one column per channel, rows in arrival order."""
	df = read_table(path)
	missing = [c for c in FACIAL_COLUMNS if c not in df.columns]
	if missing:
		raise KeyError(f"Missing facial columns: {', '.join(missing)}")
	return df.loc[:, list(FACIAL_COLUMNS)].astype(np.float64)
