"""
牌组数据结构与操作.

定义不可变的Deck类，以及构建(build_deck)、打印(print_deck)、
拆分(deal)三个无状态操作.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Optional, TextIO, Tuple, Union, overload

from ..exceptions import OutOfRangeBoundary
from .types import DECK_SIZE, card_label, get_all_suits, get_all_values, is_valid_separator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deck:
    """
    表示一副牌.

    不可变数据类，按顺序保存卡牌标签，支持长度、迭代、索引、切片和拼接.
    没有独立的Card对象，一张牌就是它的标签.

    Attributes:
        cards: 卡牌标签元组

    Examples:
        >>> deck = build_deck()
        >>> len(deck)
        16
        >>> deck[0]
        'Ace of Spades'
    """

    cards: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """
        将输入冻结为元组并校验元素类型.

        Raises:
            TypeError: 当输入是单个字符串或包含非字符串元素时
        """
        if isinstance(self.cards, str):
            raise TypeError("Deck需要标签序列，不能是单个字符串")
        cards = tuple(self.cards)
        for card in cards:
            if not isinstance(card, str):
                raise TypeError(f"卡牌标签必须是str类型，实际: {type(card)}")
        object.__setattr__(self, "cards", cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> "Deck": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, "Deck"]:
        """
        按位置取牌.

        Args:
            index: 整数位置或切片

        Returns:
            整数位置返回标签，切片返回新的Deck
        """
        if isinstance(index, slice):
            return Deck(self.cards[index])
        return self.cards[index]

    def __add__(self, other: object) -> "Deck":
        if not isinstance(other, Deck):
            return NotImplemented
        return Deck(self.cards + other.cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return len(self.cards) == 0

    def __str__(self) -> str:
        return f"Deck({len(self.cards)} cards)"

    def __repr__(self) -> str:
        return f"Deck(cards={list(self.cards)!r})"


class DealResult(NamedTuple):
    """拆分结果: 手牌前缀和剩余后缀."""

    hand: Deck
    remainder: Deck


def build_deck() -> Deck:
    """
    构建一副新牌.

    外层按花色、内层按点数遍历，每次调用都返回一副新的、内容相同的牌组.

    Returns:
        Deck: 16张牌的有序牌组
    """
    deck = Deck(
        card_label(value, suit)
        for suit in get_all_suits()
        for value in get_all_values()
    )
    logger.debug("构建牌组完成: %d/%d 张", len(deck), DECK_SIZE)
    return deck


def print_deck(deck: Iterable[str], file: Optional[TextIO] = None, separator: str = " ") -> None:
    """
    逐行打印牌组.

    每张牌输出一行，格式为"<位置><分隔符><标签>"，位置从0开始.

    Args:
        deck: 牌组或任意标签序列，可以为空
        file: 输出流，默认为标准输出
        separator: 位置与标签之间的空白分隔符

    Raises:
        ValueError: 当分隔符为空、包含非空白字符或换行符时
    """
    if not is_valid_separator(separator):
        raise ValueError(f"分隔符必须是单行的空白字符: {separator!r}")

    for index, card in enumerate(deck):
        print(f"{index}{separator}{card}", file=file)


def deal(deck: Union[Deck, Iterable[str]], hand_size: int) -> DealResult:
    """
    在指定位置拆分牌组.

    手牌为位置[0, hand_size)的前缀，剩余牌为[hand_size, len(deck))的后缀.
    原牌组保持不变，两部分按顺序拼接后与原牌组完全相同.

    Args:
        deck: 要拆分的牌组
        hand_size: 拆分边界

    Returns:
        DealResult: (hand, remainder)

    Raises:
        TypeError: 当hand_size不是整数时
        OutOfRangeBoundary: 当hand_size不在[0, len(deck)]范围内时
    """
    if not isinstance(deck, Deck):
        deck = Deck(deck)

    # bool是int的子类，这里显式排除
    if isinstance(hand_size, bool) or not isinstance(hand_size, int):
        raise TypeError(f"hand_size必须是int类型，实际: {type(hand_size)}")

    if not 0 <= hand_size <= len(deck):
        logger.warning("分牌边界越界: hand_size=%d, deck_size=%d", hand_size, len(deck))
        raise OutOfRangeBoundary(hand_size, len(deck))

    result = DealResult(hand=deck[:hand_size], remainder=deck[hand_size:])
    logger.debug("分牌完成: 手牌 %d 张, 剩余 %d 张", len(result.hand), len(result.remainder))
    return result
