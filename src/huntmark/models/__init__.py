"""Pydantic configuration models for huntmark."""
