"""Command implementations for the dietician CLI."""
