"""Command-line interface for astrodisplay."""
