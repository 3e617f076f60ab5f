"""Commit collectors."""
