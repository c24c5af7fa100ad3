"""Shared compute infrastructure: timing, tolerances, linear algebra primitives."""
