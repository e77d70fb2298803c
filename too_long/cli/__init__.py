"""Command line interface for too-long."""
