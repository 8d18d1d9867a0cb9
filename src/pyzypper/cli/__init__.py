"""Command-line interface for pyzypper."""
