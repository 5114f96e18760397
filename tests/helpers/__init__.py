"""Shared helpers for syo-ryo-uma tests."""
