"""
牌生成器.

按配置的花色和牌面做笛卡尔积，生成一副"新牌"的标准顺序.
"""

import logging
from typing import List, Union

from .card import Card
from .options import GeneratorOption, apply_generator_option
from .types import Suit, Face, standard_suits, all_faces

logger = logging.getLogger(__name__)


class CardGenerator:
    """
    牌生成器.

    持有有序的花色列表和牌面列表(均允许重复)，只在生成之前被生成期选项修改.

    Attributes:
        suits: 花色列表，决定花色分组的顺序
        faces: 牌面列表，决定每个花色组内的牌面顺序

    Examples:
        >>> generator = CardGenerator(with_suits(Suit.HEARTS))
        >>> len(generator.generate())
        13
    """

    def __init__(self, *options: GeneratorOption) -> None:
        """
        初始化生成器.

        从标准配置(四种花色 × A到K)开始，再按顺序应用给定的生成期选项.

        Args:
            options: 生成期选项，按给出的顺序应用
        """
        self.suits: List[Suit] = standard_suits()
        self.faces: List[Union[Face, int]] = all_faces()
        self.apply(*options)

    @classmethod
    def standard(cls) -> 'CardGenerator':
        """创建标准52张牌的生成器"""
        return cls()

    def apply(self, *options: GeneratorOption) -> 'CardGenerator':
        """
        按顺序应用生成期选项.

        Args:
            options: 生成期选项

        Returns:
            CardGenerator: 生成器本身，便于链式调用
        """
        for option in options:
            apply_generator_option(self, option)
        return self

    def generate(self) -> List[Card]:
        """
        生成牌序列.

        按花色优先的顺序生成: 先是第一个花色的所有牌面，再是第二个花色，依此类推.
        每次调用都返回新的列表，不修改生成器.

        Returns:
            List[Card]: 长度为 len(suits) * len(faces) 的牌序列
        """
        cards = [Card(suit, face) for suit in self.suits for face in self.faces]
        logger.debug(
            f"生成 {len(cards)} 张牌 ({len(self.suits)} 个花色 × {len(self.faces)} 个牌面)"
        )
        return cards

    def __repr__(self) -> str:
        return f"CardGenerator(suits={len(self.suits)}, faces={len(self.faces)})"


def standard_card_generator() -> CardGenerator:
    return CardGenerator.standard()
