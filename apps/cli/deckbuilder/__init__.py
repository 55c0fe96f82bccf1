"""Command-line deck builder."""
