"""IdeaBoard — ideas, comments and feedback API."""

__version__ = "0.1.0"
