"""Command line surface for taiz."""
