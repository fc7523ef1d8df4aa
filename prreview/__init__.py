"""PR review service: reviewer assignment and pull request lifecycle."""

__version__ = "1.0.0"
