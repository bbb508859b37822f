"""Project Status Line - project, branch and recent-file status for prompt integrations."""

__version__ = "0.1.0"
