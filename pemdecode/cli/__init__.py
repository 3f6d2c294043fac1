"""Command line interface for pemdecode."""
