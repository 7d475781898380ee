"""Core module for the shuttleboard application."""

from .types import FirestoreDocument

__all__ = ["FirestoreDocument"]
