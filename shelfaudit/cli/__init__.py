"""CLI frontend package."""
