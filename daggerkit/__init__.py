"""Helpers for container pipelines: commands, environment, images, install scripts and apko."""

__version__ = "0.1.0"