"""Command-line interface for zotsync."""
