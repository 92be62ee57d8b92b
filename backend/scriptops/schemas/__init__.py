"""Schemas — pydantic models for remote payloads and local JSON files."""
