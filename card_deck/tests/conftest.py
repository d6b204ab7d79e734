"""
牌组测试配置 - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的牌生成器/牌组fixture
- 固定种子的随机数生成器
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random

import pytest

from card_deck.core.card import Card
from card_deck.core.deck import Deck, new_deck
from card_deck.core.generator import CardGenerator
from card_deck.core.types import standard_suits, all_faces

STANDARD_DECK_SIZE = 52


@pytest.fixture
def standard_generator():
    """标准生成器fixture"""
    return CardGenerator.standard()


@pytest.fixture
def standard_deck(standard_generator):
    """标准52张牌组fixture"""
    return new_deck(standard_generator)


@pytest.fixture
def canonical_cards():
    """新牌顺序的52张牌"""
    return [Card(suit, face) for suit in standard_suits() for face in all_faces()]


@pytest.fixture
def reversed_deck(standard_deck):
    """倒序的标准牌组，只用swap构造，不依赖洗牌"""
    upper = len(standard_deck) - 1
    for i in range(len(standard_deck) // 2):
        standard_deck.swap(i, upper - i)
    return standard_deck


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器"""
    return random.Random(20240501)


def assert_single_suit(deck: Deck, suit) -> None:
    """断言牌组中只有一种花色"""
    for pos, card in enumerate(deck):
        assert card.suit == suit, f"第{pos}张牌 {card.render()} 花色不是 {suit.glyph}"


def assert_single_face(deck: Deck, face) -> None:
    """断言牌组中只有一种牌面"""
    for pos, card in enumerate(deck):
        assert card.face == face, f"第{pos}张牌 {card.render()} 牌面不是 {face.label}"


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "statistical: 标记依赖多次随机试验的测试"
    )


# 导出到pytest命名空间
pytest.assert_single_suit = assert_single_suit
pytest.assert_single_face = assert_single_face
