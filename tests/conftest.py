"""
pytest配置文件

提供牌组测试通用的fixture.
"""

import pytest

from cards.core.deck import Deck, build_deck


@pytest.fixture
def full_deck() -> Deck:
    """完整的16张牌组"""
    return build_deck()


@pytest.fixture
def two_card_deck() -> Deck:
    """只有两张牌的小牌组"""
    return Deck(["Ace of Spades", "Two of Spades"])


@pytest.fixture
def config_file(tmp_path):
    """写入YAML配置文件并返回路径的工厂fixture"""
    def _write(content: str):
        path = tmp_path / "cards.yaml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
