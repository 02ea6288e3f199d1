"""Multi-user kanban board with a drag-and-drop ordering engine."""

__version__ = "0.1.0"
