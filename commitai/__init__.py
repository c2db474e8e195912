"""CommitAI API: static status endpoints served with FastAPI."""

__version__ = "0.1.0"
