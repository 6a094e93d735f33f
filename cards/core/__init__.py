"""
核心模块 - 纯领域逻辑层

Modules:
    deck: 牌组构建、打印和拆分
    config: 配置加载和校验
    exceptions: 业务异常定义
"""

from .deck import Deck, DealResult, build_deck, print_deck, deal
from .config import DeckConfig, load_config
from .exceptions import CardsError, OutOfRangeBoundary, DeckConfigError

__all__ = [
    'Deck', 'DealResult', 'build_deck', 'print_deck', 'deal',
    'DeckConfig', 'load_config',
    'CardsError', 'OutOfRangeBoundary', 'DeckConfigError',
]
