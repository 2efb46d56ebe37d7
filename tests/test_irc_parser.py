"""
Tests for argus.irc.parser
"""

import pytest

from argus import colors
from argus.formatting import strip_ansi
from argus.irc.parser import (
    ChatMessage,
    ChatRole,
    parse_chat_line,
    parse_tagged_privmsg,
    parse_tags,
    parse_untagged_privmsg,
    render_chat_line,
    role_from_badges,
)

TAGGED_MOD_LINE = (
    "@display-name=Bob;badges=moderator/1 "
    ":bob!bob@bob.tmi.twitch.tv PRIVMSG #ch :hello world"
)
UNTAGGED_LINE = ":alice!alice@alice.tmi.twitch.tv PRIVMSG #ch :hi"


class TestParseTags:
    def test_well_formed_pairs(self):
        assert parse_tags("k1=v1;k2=v2") == {"k1": "v1", "k2": "v2"}

    def test_pairs_without_equals_are_dropped(self):
        assert parse_tags("k1=v1;novalue;k2=v2") == {"k1": "v1", "k2": "v2"}

    def test_empty_values_are_kept(self):
        assert parse_tags("display-name=;login=bob") == {"display-name": "", "login": "bob"}

    def test_value_may_contain_equals(self):
        assert parse_tags("reply=a=b") == {"reply": "a=b"}

    def test_empty_string(self):
        assert parse_tags("") == {}


class TestRoleFromBadges:
    @pytest.mark.parametrize(
        "badges",
        ["moderator/1", "broadcaster/1,subscriber/12", "subscriber/6,moderator/1"],
    )
    def test_privileged(self, badges):
        assert role_from_badges(badges) is ChatRole.PRIVILEGED

    @pytest.mark.parametrize("badges", ["", "subscriber/12", "vip/1,premium/1"])
    def test_ordinary(self, badges):
        assert role_from_badges(badges) is ChatRole.ORDINARY


class TestParseChatLine:
    def test_tagged_moderator_message(self):
        message = parse_chat_line(TAGGED_MOD_LINE)

        assert message == ChatMessage("Bob", "hello world", ChatRole.PRIVILEGED)
        assert message.color == colors.PRIVILEGED

    def test_untagged_falls_back_to_prefix_pattern(self):
        message = parse_chat_line(UNTAGGED_LINE)

        assert message == ChatMessage("alice", "hi", ChatRole.ORDINARY)
        assert message.color == colors.DEFAULT

    def test_display_name_falls_back_to_login(self):
        line = "@display-name=;login=carol;badges= :carol!carol@carol PRIVMSG #ch :yo"

        message = parse_chat_line(line)

        assert message.username == "carol"
        assert message.role is ChatRole.ORDINARY

    def test_message_text_is_trimmed(self):
        line = "@display-name=Dan :dan!dan@dan PRIVMSG #ch :   spaced out   "

        assert parse_chat_line(line).text == "spaced out"

    def test_text_keeps_colons_after_the_first(self):
        line = "@display-name=Eve :eve!eve@eve PRIVMSG #ch :time is 12:30"

        assert parse_chat_line(line).text == "time is 12:30"

    def test_line_without_privmsg_is_ignored(self):
        assert parse_chat_line(":tmi.twitch.tv 001 viewerbot :Welcome, GLHF!") is None

    def test_malformed_privmsg_is_dropped(self):
        # Contains PRIVMSG but matches neither strategy
        assert parse_chat_line(":tmi.twitch.tv NOTICE * :no PRIVMSG allowed") is None

    def test_tagged_strategy_rejects_untagged_line(self):
        assert parse_tagged_privmsg(UNTAGGED_LINE) is None

    def test_untagged_strategy_rejects_non_matching_line(self):
        assert parse_untagged_privmsg("PRIVMSG without prefix") is None

    def test_strategies_are_tried_in_order(self):
        calls = []

        def first(line):
            calls.append("first")
            return None

        def second(line):
            calls.append("second")
            return ChatMessage("x", "y")

        def third(line):  # pragma: no cover - must not be reached
            calls.append("third")
            return None

        result = parse_chat_line("anything", strategies=(first, second, third))

        assert result == ChatMessage("x", "y")
        assert calls == ["first", "second"]


class TestRenderChatLine:
    def test_unwrapped_format(self):
        message = ChatMessage("Bob", "hello world", ChatRole.PRIVILEGED)

        rendered = render_chat_line(message)

        assert rendered == f" [CHAT] {colors.RED}Bob{colors.RESET}: hello world"

    def test_default_color_for_ordinary_role(self):
        rendered = render_chat_line(ChatMessage("alice", "hi"))

        assert rendered.startswith(f" [CHAT] {colors.TWITCH_PURPLE}alice")

    @pytest.mark.parametrize("width", [None, 0, -5])
    def test_unknown_width_renders_unwrapped(self, width):
        message = ChatMessage("alice", "a b c d e f g h i j k l m n o p")

        assert "\n" not in render_chat_line(message, width)

    def test_wrapped_lines_align_under_text(self):
        message = ChatMessage("bob", "one two three four five six")
        prefix_len = len(" [CHAT] bob: ")

        rendered = render_chat_line(message, width=prefix_len + 9)
        lines = strip_ansi(rendered).split("\n")

        assert lines[0] == " [CHAT] bob: one two"
        for line in lines[1:]:
            assert line.startswith(" " * prefix_len)
            assert not line[prefix_len].isspace()
            assert len(line) <= prefix_len + 9
        words = " ".join(line.strip() for line in lines).split()
        assert words[2:] == ["one", "two", "three", "four", "five", "six"]
