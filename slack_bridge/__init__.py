"""Slack Bridge — Slack workspace to tenant backends, with privacy-preserving insights."""

__version__ = "0.1.0"
