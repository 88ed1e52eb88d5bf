"""Domain models for fokus."""
