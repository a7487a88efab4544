"""Test fixtures: entity factories and in-memory repositories."""
