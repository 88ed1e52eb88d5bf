"""CLI commands for fokus."""
