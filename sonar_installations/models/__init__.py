"""Installation domain models."""
