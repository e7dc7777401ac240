"""Command-line client for Spring Initializr-compatible project generation services."""
