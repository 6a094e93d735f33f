"""
牌组业务异常定义.

区分业务异常(向上抛给调用方)和编程错误(TypeError/ValueError).
"""


class CardsError(Exception):
    """牌组工具包基础异常类"""
    pass


class OutOfRangeBoundary(CardsError, IndexError):
    """
    分牌边界越界异常.

    当deal的hand_size不在[0, len(deck)]范围内时抛出.

    Attributes:
        hand_size: 调用方传入的手牌数
        deck_size: 被拆分牌组的牌数
    """

    def __init__(self, hand_size: int, deck_size: int) -> None:
        self.hand_size = hand_size
        self.deck_size = deck_size
        super().__init__(
            f"hand_size {hand_size} is out of range, expected 0 <= hand_size <= {deck_size}"
        )


class DeckConfigError(CardsError, ValueError):
    """配置错误异常"""
    pass
