"""Command-line interface for flexpoly."""
