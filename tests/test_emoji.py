import dataclasses

import pytest

from emojilookup.emoji import Emoji


class TestEmoji:
    def test_code_points__single(self):
        assert Emoji(unicode="\U0001F600").code_points == (0x1F600,)

    def test_code_points__flag(self):
        assert Emoji(unicode="\U0001F1FA\U0001F1F8").code_points == (0x1F1FA, 0x1F1F8)

    def test_html_decimal(self):
        assert Emoji(unicode="\U0001F600").html_decimal == "&#128512;"

    def test_html_hexadecimal(self):
        emoji = Emoji(unicode="\U0001F1FA\U0001F1F8")
        assert emoji.html_hexadecimal == "&#x1f1fa;&#x1f1f8;"

    def test_str(self):
        assert str(Emoji(unicode="\U0001F600")) == "\U0001F600"

    def test_frozen(self):
        emoji = Emoji(unicode="\U0001F600")
        with pytest.raises(dataclasses.FrozenInstanceError):
            emoji.unicode = "x"

    def test_hashable(self):
        a = Emoji(unicode="\U0001F600", aliases=frozenset({"grinning"}))
        b = Emoji(unicode="\U0001F600", aliases=frozenset({"grinning"}))
        assert {a, b} == {a}
