"""Shared helpers for the game rules."""
