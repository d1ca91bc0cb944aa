"""Core domain models, configuration, and shared infrastructure."""
