"""Interactive chi-square distribution chart with a shaded upper-tail rejection region."""

__version__ = "0.1.0"
