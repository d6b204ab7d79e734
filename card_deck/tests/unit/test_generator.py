"""
牌生成器与生成期选项的单元测试.
"""

import inspect

import pytest

from card_deck.core.card import Card
from card_deck.core.deck import new_deck
from card_deck.core.exceptions import UnknownOptionError
from card_deck.core.generator import CardGenerator, standard_card_generator
from card_deck.core.options import (
    with_suits, with_extended_suits, with_faces, with_additional_faces, without_faces,
    with_jokers_of_num, apply_generator_option,
)
from card_deck.core.types import Suit, Face, standard_suits, all_faces

STANDARD_DECK_SIZE = 52


class TestCardGenerator:
    """CardGenerator测试"""

    def test_standard_deck_order(self, standard_generator):
        """测试标准牌组与新牌顺序完全一致"""
        deck = new_deck(standard_generator)
        assert len(deck) == STANDARD_DECK_SIZE

        faces = all_faces()
        for s_i, suit in enumerate(standard_suits()):
            for f_i, face in enumerate(faces):
                card = deck[s_i * len(faces) + f_i]
                assert card.suit == suit, f"第{s_i * 13 + f_i}张牌花色错误: {card!r}"
                assert card.face == face, f"第{s_i * 13 + f_i}张牌牌面错误: {card!r}"

    def test_standard_factory(self):
        """测试标准生成器工厂"""
        generator = standard_card_generator()
        assert generator.suits == standard_suits()
        assert generator.faces == all_faces()

    def test_generate_is_idempotent(self, standard_generator):
        """测试重复生成得到相等但独立的序列"""
        first = standard_generator.generate()
        second = standard_generator.generate()
        assert first == second
        assert first is not second

        first.append(Card.joker())
        assert len(standard_generator.generate()) == STANDARD_DECK_SIZE

    def test_independent_decks(self, standard_generator):
        """测试同一生成器生成的牌组互不影响"""
        deck1 = new_deck(standard_generator)
        deck2 = new_deck(standard_generator, with_jokers_of_num(1))
        deck1.swap(0, 1)
        assert deck2[0] == Card(Suit.SPADES, Face.ACE)
        assert len(deck1) == STANDARD_DECK_SIZE

    def test_empty_configuration(self):
        """测试空花色列表生成空序列"""
        generator = CardGenerator(with_suits())
        assert generator.generate() == []

    def test_apply_chains(self):
        """测试apply返回生成器本身"""
        generator = CardGenerator()
        assert generator.apply(with_suits(Suit.CLUBS)) is generator
        assert generator.suits == [Suit.CLUBS]

    def test_unknown_option(self):
        """测试生成后选项不能用于生成器"""
        with pytest.raises(UnknownOptionError):
            CardGenerator(with_jokers_of_num(1))
        with pytest.raises(UnknownOptionError):
            apply_generator_option(CardGenerator(), "with_suits")

    def test_apply_generator_option_annotation(self):
        """测试生成期选项的generator参数标注为CardGenerator"""
        annotation = inspect.signature(apply_generator_option).parameters["generator"].annotation
        assert annotation == "CardGenerator"

    def test_apply_generator_option_directly(self):
        """测试直接对生成器应用选项"""
        generator = CardGenerator()
        apply_generator_option(generator, with_suits(Suit.STAR))
        assert generator.suits == [Suit.STAR]
        assert len(generator.generate()) == 13


class TestGeneratorOptions:
    """生成期选项测试"""

    def test_with_suits(self):
        """测试只保留给定花色"""
        deck = new_deck(CardGenerator(with_suits(Suit.HEARTS)))
        assert len(deck) == 13
        pytest.assert_single_suit(deck, Suit.HEARTS)

    def test_with_suits_preserves_order(self):
        """测试花色按给定顺序分组"""
        cards = CardGenerator(with_suits(Suit.HEARTS, Suit.SPADES)).generate()
        assert [c.suit for c in cards[:13]] == [Suit.HEARTS] * 13
        assert [c.suit for c in cards[13:]] == [Suit.SPADES] * 13

    def test_with_extended_suits(self):
        """测试追加花色产生重复的花色组"""
        generator = CardGenerator(with_extended_suits(Suit.HEARTS))
        deck = new_deck(generator)
        assert len(deck) == STANDARD_DECK_SIZE + len(generator.faces)
        for i in range(STANDARD_DECK_SIZE, len(deck)):
            assert deck[i].suit == Suit.HEARTS
        assert generator.suits.count(Suit.HEARTS) == 2

    def test_with_faces(self):
        """测试只保留给定牌面"""
        deck = new_deck(CardGenerator(with_faces(Face.ACE)))
        assert len(deck) == 4
        pytest.assert_single_face(deck, Face.ACE)

    def test_with_additional_faces(self):
        """测试追加牌面位于每个花色组的末尾"""
        added = [Face.ACE, Face.FIVE, Face.JACK]
        generator = CardGenerator(with_additional_faces(*added))
        deck = new_deck(generator)
        assert len(deck) == STANDARD_DECK_SIZE + len(added) * len(generator.suits)

        group = 13 + len(added)
        for s_i in range(len(generator.suits)):
            for i, face in enumerate(added):
                assert deck[s_i * group + 13 + i].face == face

    def test_without_faces(self):
        """测试去掉除K以外的所有牌面"""
        unwanted = [face for face in all_faces() if face != Face.KING]
        deck = new_deck(CardGenerator(without_faces(*unwanted)))
        assert len(deck) == 4
        pytest.assert_single_face(deck, Face.KING)

    def test_without_faces_removes_duplicates(self):
        """测试去除牌面时删除所有重复出现"""
        generator = CardGenerator(
            with_additional_faces(Face.ACE, Face.ACE),
            without_faces(Face.ACE, Face.ACE),
        )
        assert Face.ACE not in generator.faces
        assert len(generator.faces) == 12

    def test_without_absent_face(self):
        """测试去除不存在的牌面不影响结果"""
        generator = CardGenerator(without_faces(Face.JOKER))
        assert generator.faces == all_faces()

    def test_options_are_order_sensitive(self):
        """测试选项不可交换"""
        a = CardGenerator(with_faces(Face.ACE), with_additional_faces(Face.KING))
        b = CardGenerator(with_additional_faces(Face.KING), with_faces(Face.ACE))
        assert a.faces == [Face.ACE, Face.KING]
        assert b.faces == [Face.ACE]

    def test_options_do_not_alias_lists(self):
        """测试选项中的元组不会与生成器共享"""
        option = with_suits(Suit.CLUBS)
        g1 = CardGenerator(option)
        g2 = CardGenerator(option)
        g1.apply(with_extended_suits(Suit.HEARTS))
        assert g2.suits == [Suit.CLUBS]
