"""
cards - 最小化的扑克牌组模型

构建16张牌的有序牌组，逐行打印，并在指定位置拆分为手牌和剩余牌.
"""

from .core import (
    Deck, DealResult, build_deck, print_deck, deal,
    DeckConfig, load_config,
    CardsError, OutOfRangeBoundary, DeckConfigError,
)

__version__ = "1.0.0"

__all__ = [
    'Deck', 'DealResult', 'build_deck', 'print_deck', 'deal',
    'DeckConfig', 'load_config',
    'CardsError', 'OutOfRangeBoundary', 'DeckConfigError',
]
