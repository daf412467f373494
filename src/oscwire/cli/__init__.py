"""Command-line interface for oscwire."""
