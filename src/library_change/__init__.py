"""Library change analysis for commits touching Gradle build files."""

__version__ = "0.1.0"
