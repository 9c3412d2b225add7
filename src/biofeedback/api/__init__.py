"""HTTP service exposing biofeedback processing sessions."""
