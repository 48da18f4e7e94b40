"""Command-line interface for Arr Repair."""
