"""Textual UI for tasky."""

from tasky.ui.app import TaskyApp

__all__ = ["TaskyApp"]
