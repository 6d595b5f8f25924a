"""Command line interface for solcheck."""
