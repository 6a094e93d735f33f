"""
牌组管理模块.

提供不可变的Deck类和构建、打印、拆分牌组的操作.
"""

from .deck import Deck, DealResult, build_deck, print_deck, deal
from .types import (
    SUITS, VALUES, DECK_SIZE, card_label, get_all_suits, get_all_values, is_valid_separator,
)

__all__ = [
    'Deck', 'DealResult', 'build_deck', 'print_deck', 'deal',
    'SUITS', 'VALUES', 'DECK_SIZE', 'card_label', 'get_all_suits', 'get_all_values',
    'is_valid_separator',
]
