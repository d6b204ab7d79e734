"""
牌组配置选项.

选项分两类，按调用方给出的顺序依次应用，彼此不可交换:

- 生成期选项(GeneratorOption): 在生成之前修改CardGenerator的花色/牌面列表
- 生成后选项(DeckOption): 修改已经生成的牌序列，每个选项接收并返回完整序列

每个选项都是带kind标签的不可变数据对象，应用时按标签分派到对应的处理函数.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Tuple, Union

from .card import Card
from .exceptions import InvalidOptionError, UnknownOptionError
from .types import Suit, Face

if TYPE_CHECKING:
    from .generator import CardGenerator

logger = logging.getLogger(__name__)

CardPredicate = Callable[[Card], bool]


class GeneratorOptionKind(Enum):
    """生成期选项类型"""
    SET_SUITS = "set_suits"
    EXTEND_SUITS = "extend_suits"
    SET_FACES = "set_faces"
    ADD_FACES = "add_faces"
    REMOVE_FACES = "remove_faces"


class DeckOptionKind(Enum):
    """生成后选项类型"""
    ADD_CARDS = "add_cards"
    REMOVE_CARDS = "remove_cards"
    REMOVE_CARDS_EXACT = "remove_cards_exact"
    REPLICATE = "replicate"
    ADD_JOKERS = "add_jokers"
    FILTER = "filter"


# ---------------------------------------------------------------------------
# 生成期选项
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratorOption:
    """生成期选项基类"""
    kind = None  # type: GeneratorOptionKind


@dataclass(frozen=True)
class SetSuits(GeneratorOption):
    """用给定花色整体替换花色列表，保持给定顺序"""
    suits: Tuple[Suit, ...]
    kind = GeneratorOptionKind.SET_SUITS


@dataclass(frozen=True)
class ExtendSuits(GeneratorOption):
    """在现有花色之后追加花色，不去重"""
    suits: Tuple[Suit, ...]
    kind = GeneratorOptionKind.EXTEND_SUITS


@dataclass(frozen=True)
class SetFaces(GeneratorOption):
    """用给定牌面整体替换牌面列表"""
    faces: Tuple[Union[Face, int], ...]
    kind = GeneratorOptionKind.SET_FACES


@dataclass(frozen=True)
class AddFaces(GeneratorOption):
    """在现有牌面之后追加牌面，不去重"""
    faces: Tuple[Union[Face, int], ...]
    kind = GeneratorOptionKind.ADD_FACES


@dataclass(frozen=True)
class RemoveFaces(GeneratorOption):
    """删除所有属于给定集合的牌面(包括重复出现的)"""
    faces: Tuple[Union[Face, int], ...]
    kind = GeneratorOptionKind.REMOVE_FACES


def with_suits(*suits: Suit) -> SetSuits:
    return SetSuits(tuple(suits))


def with_extended_suits(*suits: Suit) -> ExtendSuits:
    # 追加的花色会产生重复的花色组，而不是新的花色
    return ExtendSuits(tuple(suits))


def with_faces(*faces: Union[Face, int]) -> SetFaces:
    """
    只生成给定牌面.

    例如 with_faces(Face.ACE, Face.FIVE, Face.JACK) 使每个花色只包含A、5、J.
    """
    return SetFaces(tuple(faces))


def with_additional_faces(*faces: Union[Face, int]) -> AddFaces:
    return AddFaces(tuple(faces))


def without_faces(*faces: Union[Face, int]) -> RemoveFaces:
    """
    不生成给定牌面.

    例如 without_faces(Face.ACE, Face.FIVE) 去掉所有花色的A和5.
    """
    return RemoveFaces(tuple(faces))


def _set_suits(generator: 'CardGenerator', option: SetSuits) -> None:
    generator.suits = list(option.suits)


def _extend_suits(generator: 'CardGenerator', option: ExtendSuits) -> None:
    generator.suits = generator.suits + list(option.suits)


def _set_faces(generator: 'CardGenerator', option: SetFaces) -> None:
    generator.faces = list(option.faces)


def _add_faces(generator: 'CardGenerator', option: AddFaces) -> None:
    generator.faces = generator.faces + list(option.faces)


def _remove_faces(generator: 'CardGenerator', option: RemoveFaces) -> None:
    unwanted = set(option.faces)
    generator.faces = [face for face in generator.faces if face not in unwanted]


_GENERATOR_HANDLERS: Dict[GeneratorOptionKind, Callable] = {
    GeneratorOptionKind.SET_SUITS: _set_suits,
    GeneratorOptionKind.EXTEND_SUITS: _extend_suits,
    GeneratorOptionKind.SET_FACES: _set_faces,
    GeneratorOptionKind.ADD_FACES: _add_faces,
    GeneratorOptionKind.REMOVE_FACES: _remove_faces,
}


def apply_generator_option(generator: 'CardGenerator', option: GeneratorOption) -> None:
    """
    将一个生成期选项应用到生成器上.

    Args:
        generator: CardGenerator实例，会被原地修改
        option: 生成期选项

    Raises:
        UnknownOptionError: 当option不是生成期选项时
    """
    if not isinstance(option, GeneratorOption):
        raise UnknownOptionError(f"不是生成期选项: {option!r}")
    handler = _GENERATOR_HANDLERS.get(option.kind)
    if handler is None:
        raise UnknownOptionError(f"未知的生成期选项类型: {option.kind}")
    handler(generator, option)
    logger.debug(
        f"应用生成期选项 {option.kind.value}: "
        f"{len(generator.suits)} 个花色, {len(generator.faces)} 个牌面"
    )


# ---------------------------------------------------------------------------
# 生成后选项
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeckOption:
    """生成后选项基类"""
    kind = None  # type: DeckOptionKind


@dataclass(frozen=True)
class AddCards(DeckOption):
    """按给定顺序在末尾追加牌，不去重"""
    cards: Tuple[Card, ...]
    kind = DeckOptionKind.ADD_CARDS


@dataclass(frozen=True)
class RemoveCards(DeckOption):
    """
    基于集合的移除.

    移除列表先折叠为集合，牌组中与集合匹配的牌全部被丢弃(包括所有重复的牌).
    结果的目标长度为 len(牌组) - len(移除列表)，复制到目标长度后立即停止扫描，
    因此当移除列表与牌组中实际的重复数不一致时，结果会被截断或变短.
    需要按次数精确移除时使用 RemoveCardsExact.
    """
    cards: Tuple[Card, ...]
    kind = DeckOptionKind.REMOVE_CARDS


@dataclass(frozen=True)
class RemoveCardsExact(DeckOption):
    """基于多重集合的移除: 列表中每出现一次就移除一张(从前往后)"""
    cards: Tuple[Card, ...]
    kind = DeckOptionKind.REMOVE_CARDS_EXACT


@dataclass(frozen=True)
class Replicate(DeckOption):
    """将当前序列原样重复times次"""
    times: int
    kind = DeckOptionKind.REPLICATE

    def __post_init__(self):
        """验证倍数的有效性"""
        if isinstance(self.times, bool) or not isinstance(self.times, int):
            raise InvalidOptionError(f"倍数必须是整数: {self.times!r}")
        if self.times < 1:
            raise InvalidOptionError(f"倍数必须为正整数: {self.times}")


@dataclass(frozen=True)
class AddJokers(DeckOption):
    """在末尾追加count张王牌"""
    count: int
    kind = DeckOptionKind.ADD_JOKERS

    def __post_init__(self):
        """验证王牌数量的有效性"""
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidOptionError(f"王牌数量必须是整数: {self.count!r}")
        if self.count < 0:
            raise InvalidOptionError(f"王牌数量不能为负数: {self.count}")


@dataclass(frozen=True)
class Filter(DeckOption):
    """丢弃所有predicate为真的牌，其余牌保持相对顺序"""
    predicate: CardPredicate
    kind = DeckOptionKind.FILTER

    def __post_init__(self):
        if not callable(self.predicate):
            raise InvalidOptionError(f"过滤条件必须可调用: {self.predicate!r}")


def with_added_cards(*cards: Card) -> AddCards:
    """用于无法通过生成器控制的特殊加牌场景"""
    return AddCards(tuple(cards))


def with_removed_cards(*cards: Card) -> RemoveCards:
    return RemoveCards(tuple(cards))


def with_removed_cards_exact(*cards: Card) -> RemoveCardsExact:
    return RemoveCardsExact(tuple(cards))


def with_deck_times(times: int) -> Replicate:
    """将牌组扩大为times倍，例如2倍牌"""
    return Replicate(times)


def with_jokers_of_num(count: int) -> AddJokers:
    return AddJokers(count)


def with_custom_filter(predicate: CardPredicate) -> Filter:
    return Filter(predicate)


def _add_cards(cards: List[Card], option: AddCards) -> List[Card]:
    return cards + list(option.cards)


def _remove_cards(cards: List[Card], option: RemoveCards) -> List[Card]:
    expected = len(cards) - len(option.cards)
    target = max(expected, 0)
    unwanted = set(option.cards)

    result: List[Card] = []
    for card in cards:
        if len(result) == target:
            break
        if card not in unwanted:
            result.append(card)

    if len(result) != expected:
        logger.warning(
            f"按集合移除 {len(option.cards)} 张牌后剩余 {len(result)} 张，"
            f"预期 {expected} 张: 移除列表与牌组中的重复数不一致"
        )
    return result


def _remove_cards_exact(cards: List[Card], option: RemoveCardsExact) -> List[Card]:
    pending = Counter(option.cards)
    result: List[Card] = []
    for card in cards:
        if pending[card] > 0:
            pending[card] -= 1
        else:
            result.append(card)

    missing = sum(pending.values())
    if missing:
        logger.debug(f"有 {missing} 张待移除的牌不在牌组中，已忽略")
    return result


def _replicate(cards: List[Card], option: Replicate) -> List[Card]:
    return cards * option.times


def _add_jokers(cards: List[Card], option: AddJokers) -> List[Card]:
    return cards + [Card.joker()] * option.count


def _filter(cards: List[Card], option: Filter) -> List[Card]:
    return [card for card in cards if not option.predicate(card)]


_DECK_HANDLERS: Dict[DeckOptionKind, Callable[[List[Card], DeckOption], List[Card]]] = {
    DeckOptionKind.ADD_CARDS: _add_cards,
    DeckOptionKind.REMOVE_CARDS: _remove_cards,
    DeckOptionKind.REMOVE_CARDS_EXACT: _remove_cards_exact,
    DeckOptionKind.REPLICATE: _replicate,
    DeckOptionKind.ADD_JOKERS: _add_jokers,
    DeckOptionKind.FILTER: _filter,
}


def apply_deck_option(cards: List[Card], option: DeckOption) -> List[Card]:
    """
    将一个生成后选项应用到牌序列上.

    Args:
        cards: 当前的完整牌序列，不会被修改
        option: 生成后选项

    Returns:
        List[Card]: 新的完整牌序列

    Raises:
        UnknownOptionError: 当option不是生成后选项时
    """
    if not isinstance(option, DeckOption):
        raise UnknownOptionError(f"不是生成后选项: {option!r}")
    handler = _DECK_HANDLERS.get(option.kind)
    if handler is None:
        raise UnknownOptionError(f"未知的生成后选项类型: {option.kind}")
    result = handler(cards, option)
    logger.debug(f"应用生成后选项 {option.kind.value}: {len(cards)} -> {len(result)} 张")
    return result
