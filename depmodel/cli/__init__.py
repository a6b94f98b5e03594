"""Command-line commands for depmodel."""
