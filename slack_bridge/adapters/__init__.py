"""Adapters: backend HTTP clients, Slack listeners and the web server."""
