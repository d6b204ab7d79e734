"""
牌组核心模块.

提供牌的数据模型、牌生成器、配置选项、牌组以及排序/洗牌操作.
核心模块只依赖标准库，不依赖配置层.

Modules:
    types: 花色、牌面等基础枚举
    card: 不可变的Card类
    generator: 牌生成器
    options: 生成期/生成后配置选项
    deck: 牌组
    ordering: 排序与洗牌
    exceptions: 异常定义
"""

from .types import Suit, Face, SUIT_CARD_AMOUNT, face_label, standard_suits, all_faces
from .card import Card, make_card, render, order_key
from .exceptions import CardDeckError, InvalidOptionError, UnknownOptionError, DeckConfigError
from .options import (
    GeneratorOption, GeneratorOptionKind, DeckOption, DeckOptionKind,
    SetSuits, ExtendSuits, SetFaces, AddFaces, RemoveFaces,
    AddCards, RemoveCards, RemoveCardsExact, Replicate, AddJokers, Filter,
    with_suits, with_extended_suits, with_faces, with_additional_faces, without_faces,
    with_added_cards, with_removed_cards, with_removed_cards_exact,
    with_deck_times, with_jokers_of_num, with_custom_filter,
    apply_generator_option, apply_deck_option,
)
from .generator import CardGenerator, standard_card_generator
from .deck import Deck, new_deck
from .ordering import stable_sort, standard_sort, shuffle

__all__ = [
    # 基础类型
    'Suit', 'Face', 'SUIT_CARD_AMOUNT', 'face_label', 'standard_suits', 'all_faces',

    # 牌
    'Card', 'make_card', 'render', 'order_key',

    # 异常
    'CardDeckError', 'InvalidOptionError', 'UnknownOptionError', 'DeckConfigError',

    # 生成期选项
    'GeneratorOption', 'GeneratorOptionKind',
    'SetSuits', 'ExtendSuits', 'SetFaces', 'AddFaces', 'RemoveFaces',
    'with_suits', 'with_extended_suits', 'with_faces', 'with_additional_faces', 'without_faces',
    'apply_generator_option',

    # 生成后选项
    'DeckOption', 'DeckOptionKind',
    'AddCards', 'RemoveCards', 'RemoveCardsExact', 'Replicate', 'AddJokers', 'Filter',
    'with_added_cards', 'with_removed_cards', 'with_removed_cards_exact',
    'with_deck_times', 'with_jokers_of_num', 'with_custom_filter',
    'apply_deck_option',

    # 生成器与牌组
    'CardGenerator', 'standard_card_generator', 'Deck', 'new_deck',

    # 排序与洗牌
    'stable_sort', 'standard_sort', 'shuffle',
]
