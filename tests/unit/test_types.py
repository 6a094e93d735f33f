"""
牌组常量和标签格式的单元测试.
"""

import pytest

from cards.core.deck.types import (
    SUITS, VALUES, DECK_SIZE, card_label, get_all_suits, get_all_values, is_valid_separator,
)


@pytest.mark.unit
@pytest.mark.fast
class TestDeckTypes:
    """花色、点数常量测试"""

    def test_suit_order(self):
        """测试花色的固定顺序"""
        assert SUITS == ("Spades", "Diamond", "Hearts", "Clubs")

    def test_value_order(self):
        """测试点数的固定顺序"""
        assert VALUES == ("Ace", "Two", "Three", "Four")

    def test_deck_size(self):
        assert DECK_SIZE == 16

    def test_getters_return_fresh_lists(self):
        """测试获取函数返回新列表，修改不影响常量"""
        suits = get_all_suits()
        suits.append("Stars")
        assert get_all_suits() == list(SUITS)

        values = get_all_values()
        values.clear()
        assert get_all_values() == list(VALUES)

    def test_card_label(self):
        """测试卡牌标签格式"""
        assert card_label("Ace", "Spades") == "Ace of Spades"
        assert card_label("Four", "Clubs") == "Four of Clubs"

    @pytest.mark.parametrize("separator", [" ", "\t", "  ", " \t"])
    def test_valid_separators(self, separator):
        assert is_valid_separator(separator)

    @pytest.mark.parametrize("separator", ["", ",", "\n", "\r", "\r\n", " \n", "\v", "\f", "\u2028"])
    def test_invalid_separators(self, separator):
        """测试空串、非空白和换行类字符都不是有效分隔符"""
        assert not is_valid_separator(separator)
