"""
牌组相关常量定义.

定义固定顺序的花色、点数词表以及卡牌标签的格式.
"""

from typing import List, Tuple

# 花色顺序决定牌组的外层顺序
SUITS: Tuple[str, ...] = ("Spades", "Diamond", "Hearts", "Clubs")

# 点数顺序决定每个花色内的顺序
VALUES: Tuple[str, ...] = ("Ace", "Two", "Three", "Four")

DECK_SIZE: int = len(SUITS) * len(VALUES)

LABEL_FORMAT = "{value} of {suit}"


def get_all_suits() -> List[str]:
    """
    获取所有花色.

    Returns:
        List[str]: 按固定顺序排列的花色列表
    """
    return list(SUITS)


def get_all_values() -> List[str]:
    """
    获取所有点数.

    Returns:
        List[str]: 按固定顺序排列的点数列表
    """
    return list(VALUES)


def card_label(value: str, suit: str) -> str:
    """
    生成卡牌标签.

    Args:
        value: 点数名称，如"Ace"
        suit: 花色名称，如"Spades"

    Returns:
        str: 形如"Ace of Spades"的标签
    """
    return LABEL_FORMAT.format(value=value, suit=suit)


def is_valid_separator(separator: str) -> bool:
    """
    检查打印分隔符是否有效.

    分隔符必须非空、只含空白字符且不含换行类字符，保证每张牌只输出一行.

    Args:
        separator: 待检查的分隔符

    Returns:
        bool: 有效时返回True
    """
    return separator.isspace() and separator.splitlines() == [separator]
