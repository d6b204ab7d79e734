"""
扑克牌基础类型定义.

定义花色、牌面等基础枚举类型，以及标准牌组的花色/牌面顺序.
"""

from enum import IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    声明顺序即排序顺序: 黑桃 < 方块 < 梅花 < 红桃 < 星(王牌专用花色).
    """

    SPADES = 0      # 黑桃
    DIAMONDS = 1    # 方块
    CLUBS = 2       # 梅花
    HEARTS = 3      # 红桃
    STAR = 4        # 星，仅用于王牌

    @property
    def glyph(self) -> str:
        """返回花色符号"""
        return _SUIT_GLYPHS[self]

    def __str__(self) -> str:
        return self.glyph


# U+FE0E 强制文本样式显示，避免终端渲染成彩色emoji
_SUIT_GLYPHS: Dict[Suit, str] = {
    Suit.SPADES: "♠︎",
    Suit.DIAMONDS: "♦︎",
    Suit.CLUBS: "♣︎",
    Suit.HEARTS: "♥︎",
    Suit.STAR: "☆",
}


class Face(IntEnum):
    """
    扑克牌牌面枚举.

    A为1，数字牌为其点数，J/Q/K分别为11/12/13，王牌为14.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14

    @property
    def label(self) -> str:
        """返回牌面的简短表示"""
        return face_label(self)

    def __str__(self) -> str:
        return self.label


# 每个花色的标准牌数，也是排序键的花色乘数
SUIT_CARD_AMOUNT: int = int(Face.KING)

_FACE_LABELS: Dict[int, str] = {
    1: "A",
    11: "J",
    12: "Q",
    13: "K",
    14: "?",
}


def face_label(value: int) -> str:
    """
    返回牌面数值的显示字符串.

    不在查找表中的数值(包括1-14以外的数值)直接显示为十进制数字.

    Args:
        value: 牌面数值，可以是Face或任意整数

    Returns:
        str: 牌面显示字符串，如"A"、"7"、"?"
    """
    value = int(value)
    return _FACE_LABELS.get(value, str(value))


def standard_suits() -> List[Suit]:
    """
    获取新牌的标准花色顺序.

    Returns:
        List[Suit]: 黑桃、方块、梅花、红桃
    """
    return [Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS]


def all_faces() -> List[Face]:
    """
    获取所有标准牌面(A到K，不含王牌).

    Returns:
        List[Face]: 13种牌面，按点数升序
    """
    return [face for face in Face if face != Face.JOKER]
