"""Command-line interface for drone-advisor."""
