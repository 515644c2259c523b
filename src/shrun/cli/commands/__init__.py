"""shrun CLI commands."""
