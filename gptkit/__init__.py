"""Configuration, request and response models and form helpers for OpenAI-compatible APIs."""

__version__ = "0.1.0"