#!/usr/bin/env python3
"""Slack bridge server entry point."""

import uvicorn

from slack_bridge.config import AppConfig
from slack_bridge.launcher import create_server

config = AppConfig.from_env()
app = create_server(config)

if __name__ == "__main__":
    print(f"⚡️ Slack bridge running on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level="info")
