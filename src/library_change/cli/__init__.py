"""Command line interface for library-change."""
