"""Core analysis pipeline for library-change."""
