"""Seniwise residents API."""
