"""Utility helpers for boolquery."""
