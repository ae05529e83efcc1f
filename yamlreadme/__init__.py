"""Summarize a directory's YAML files into a Markdown overview using an Ollama model."""

__version__ = "0.1.0"