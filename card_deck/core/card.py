"""
扑克牌数据结构.

定义不可变的Card类，以及构造、渲染和排序键等基础操作.
"""

from dataclasses import dataclass
from typing import Union

from .types import Suit, Face, SUIT_CARD_AMOUNT, face_label


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，只按花色和牌面的值比较相等，不做任何有效性校验:
    任意花色与牌面的组合都可以构造，牌面也可以是1-14以外的整数.

    Attributes:
        suit: 花色
        face: 牌面

    Examples:
        >>> card = Card(Suit.HEARTS, Face.ACE)
        >>> card.render()
        ' ♥︎ A '
        >>> card.order_key
        40
    """

    suit: Suit
    face: Union[Face, int]

    @classmethod
    def joker(cls) -> 'Card':
        """返回约定的王牌 (星, 王)"""
        return cls(Suit.STAR, Face.JOKER)

    @property
    def order_key(self) -> int:
        """标准排序键，见 order_key()"""
        return order_key(self)

    def render(self) -> str:
        """
        返回固定格式的显示字符串.

        Returns:
            str: 格式为" 花色 牌面 "的字符串，如" ♠︎ K "
        """
        return render(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        face = self.face.name if isinstance(self.face, Face) else str(self.face)
        return f"Card({self.suit.name}, {face})"


def make_card(suit: Suit, face: Union[Face, int]) -> Card:
    """构造一张牌，不做校验"""
    return Card(suit, face)


def render(card: Card) -> str:
    return f" {card.suit.glyph} {face_label(card.face)} "


def order_key(card: Card) -> int:
    """
    计算牌的标准排序键.

    键值为 花色序号 * SUIT_CARD_AMOUNT + 牌面数值. 只有四种标准花色和
    A-K牌面之间的比较才有意义; 星花色的王牌总是排在所有标准牌之后.

    Args:
        card: 要计算的牌

    Returns:
        int: 排序键
    """
    return int(card.suit) * SUIT_CARD_AMOUNT + int(card.face)
