"""
牌组.

定义Deck类，持有有序的牌序列和发牌游标，提供排序/洗牌所需的长度与交换操作.
"""

import logging
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .card import Card
from .generator import CardGenerator
from .options import DeckOption, apply_deck_option

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副牌.

    牌序列允许重复，每个Deck独占自己的序列. 构造后可以通过交换、洗牌、
    排序或继续应用生成后选项原地修改.

    Attributes:
        _cards: 当前牌序列
        deal_index: 发牌游标，初始为0

    Examples:
        >>> deck = new_deck(CardGenerator(), with_jokers_of_num(2))
        >>> len(deck)
        54
    """

    def __init__(self, cards: Optional[Sequence[Card]] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始牌序列，会被复制. 为None时为空牌组
        """
        self._cards: List[Card] = list(cards) if cards is not None else []
        self.deal_index: int = 0

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前牌序列的快照"""
        return tuple(self._cards)

    def apply(self, *options: DeckOption) -> 'Deck':
        """
        按顺序应用生成后选项.

        Args:
            options: 生成后选项，每个选项接收并返回完整的牌序列

        Returns:
            Deck: 牌组本身，便于链式调用
        """
        for option in options:
            self._cards = apply_deck_option(self._cards, option)
        return self

    def swap(self, i: int, j: int) -> None:
        """交换两个位置上的牌"""
        self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def sort(self, key: Callable[[Card], object]) -> None:
        """按key稳定排序"""
        self._cards.sort(key=key)

    def render(self, per_row: Optional[int] = None) -> str:
        """
        返回整副牌的文本表示.

        Args:
            per_row: 每行的牌数，默认为牌数的四分之一(至少1张)

        Returns:
            str: 多行文本，每张牌为" 花色 牌面 "格式
        """
        if not self._cards:
            return ""
        if per_row is None:
            per_row = max(len(self._cards) // 4, 1)
        if per_row < 1:
            raise ValueError(f"每行牌数必须为正数: {per_row}")

        rows = []
        for start in range(0, len(self._cards), per_row):
            rows.append("".join(card.render() for card in self._cards[start:start + per_row]))
        return "\n".join(rows)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index):
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)}, deal_index={self.deal_index})"


def new_deck(generator: Optional[CardGenerator] = None, *options: DeckOption) -> Deck:
    """
    生成一副新牌组.

    调用一次生成器的generate()，再按顺序应用生成后选项.

    Args:
        generator: 牌生成器，为None时使用标准生成器
        options: 生成后选项

    Returns:
        Deck: 新的牌组
    """
    if generator is None:
        generator = CardGenerator.standard()
    deck = Deck(generator.generate())
    deck.apply(*options)
    logger.debug(f"新牌组构建完成: {len(deck)} 张")
    return deck
