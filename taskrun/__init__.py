"""Building blocks for a YAML-driven task runner: argument parsing, ordered maps, output styles, up-to-date checks, summaries, listings and helper commands."""

__version__ = "0.1.0"