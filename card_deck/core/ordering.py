"""
牌组排序与洗牌.
"""

import logging
import random
import time
from typing import Callable, Optional

from .card import Card, order_key
from .deck import Deck

logger = logging.getLogger(__name__)


def stable_sort(deck: Deck, key: Callable[[Card], object]) -> None:
    """
    按key对牌组原地稳定排序.

    键值相同的牌(例如复制出来的重复牌、多张王牌)保持原有的相对顺序.

    Args:
        deck: 要排序的牌组
        key: 排序键函数
    """
    deck.sort(key)


def standard_sort(deck: Deck) -> None:
    """按标准排序键升序稳定排序，标准牌组会恢复为新牌的顺序"""
    stable_sort(deck, order_key)


def shuffle(deck: Deck, rng: Optional[random.Random] = None) -> None:
    """
    洗牌.

    使用Fisher-Yates洗牌算法通过deck.swap原地打乱牌的顺序.

    Args:
        deck: 要洗的牌组
        rng: 随机数生成器，传入固定种子的生成器可得到确定的结果.
             为None时在调用时创建一个以当前时间为种子的生成器
    """
    if rng is None:
        rng = random.Random(time.time_ns())

    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck.swap(i, j)
    logger.debug(f"洗牌完成: {len(deck)} 张")
