"""Command-line interface for pgcube."""
