"""Shared setup helpers for the filetree tools."""
