"""Diagnostics package.

Light-weight text tools, each runnable through the CLI or `python -m`.
"""

__all__ = ["pascha_table", "tone_month", "round_trip"]
