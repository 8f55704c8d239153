"""Tests for message eligibility checks."""

from slack_bridge.domain.eligibility import is_eligible, is_emoji_only
from slack_bridge.ports.inbound import ChannelType, MessageEvent


def _msg(text="the build is failing again today", **overrides):
    fields = dict(
        text=text,
        channel_id="C123",
        channel_type=ChannelType.CHANNEL,
        workspace_id="T1",
        user_id="U1",
    )
    fields.update(overrides)
    return MessageEvent(**fields)


class TestIsEligible:
    def test_public_channel_message(self):
        assert is_eligible(_msg()) is True

    def test_non_message_input(self):
        assert is_eligible(None) is False
        assert is_eligible({"text": "the build is failing again"}) is False

    def test_dm_and_private_channels_rejected(self):
        assert is_eligible(_msg(channel_type=ChannelType.DM, channel_id="D1")) is False
        assert is_eligible(_msg(channel_type=ChannelType.GROUP, channel_id="G1")) is False
        assert is_eligible(_msg(channel_type=ChannelType.UNKNOWN)) is False

    def test_channel_id_must_look_public(self):
        assert is_eligible(_msg(channel_id="G123")) is False
        assert is_eligible(_msg(channel_id="")) is False

    def test_bot_messages_rejected(self):
        assert is_eligible(_msg(bot_id="B1")) is False
        assert is_eligible(_msg(subtype="bot_message")) is False

    def test_system_subtypes_rejected(self):
        assert is_eligible(_msg(subtype="channel_join")) is False
        assert is_eligible(_msg(subtype="message_changed")) is False

    def test_thread_broadcast_allowed(self):
        assert is_eligible(_msg(subtype="thread_broadcast")) is True

    def test_too_few_words(self):
        assert is_eligible(_msg(text="too few words")) is False
        assert is_eligible(_msg(text="exactly four words here")) is True

    def test_empty_text(self):
        assert is_eligible(_msg(text="")) is False

    def test_emoji_only(self):
        assert is_eligible(_msg(text=":tada: :fire: :rocket: :100:")) is False
        assert is_eligible(_msg(text="🎉 🔥 🚀 💯")) is False
        assert is_eligible(_msg(text="😀 😀 😀")) is False

    def test_adjacent_shortcodes_are_emoji_only(self):
        assert is_eligible(_msg(text=":tada::tada: :fire::fire: :rocket: :100:")) is False
        assert is_eligible(_msg(text=":+1::skin-tone-2: :+1::skin-tone-3: :clap: :clap:")) is False


class TestIsEmojiOnly:
    def test_shortcodes(self):
        assert is_emoji_only(":thumbsup: :+1: :heart_eyes:") is True

    def test_glyphs(self):
        assert is_emoji_only("😀 😀") is True

    def test_adjacent_shortcodes(self):
        assert is_emoji_only(":tada::tada: :fire::fire:") is True
        assert is_emoji_only(":+1::skin-tone-2:") is True

    def test_shortcode_glued_to_word(self):
        assert is_emoji_only(":tada:shipped") is False

    def test_mixed_with_words(self):
        assert is_emoji_only(":tada: shipped it") is False

    def test_empty(self):
        assert is_emoji_only("") is False
        assert is_emoji_only("   ") is False
