"""Slack adapter — slack_bolt listeners and reply ports."""

from slack_bridge.adapters.slack.adapter import BoltChannel, BoltResponder, SlackBridgeAdapter

__all__ = ["BoltChannel", "BoltResponder", "SlackBridgeAdapter"]
