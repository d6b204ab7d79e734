"""
牌组配置管理

负责把声明式的牌组配置转换为生成期/生成后选项，包括：
- 经过校验的牌组配置(DeckConfig)
- 常用牌组的命名配置(standard、jokers、euchre、pinochle、double)
- 日志配置

核心模块不依赖本模块，本模块只是核心选项之上的一层便捷接口。
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core.deck import Deck, new_deck
from .core.exceptions import DeckConfigError
from .core.generator import CardGenerator
from .core.options import (
    DeckOption, GeneratorOption,
    with_suits, with_extended_suits, with_faces, with_additional_faces, without_faces,
    with_deck_times, with_jokers_of_num,
)
from .core.ordering import shuffle as shuffle_deck
from .core.types import Suit, Face, standard_suits, all_faces


@pydantic_dataclass(frozen=True)
class DeckConfig:
    """牌组配置.

    字段按以下顺序转换为选项: 先设置花色和牌面，再追加花色、追加牌面、去除牌面;
    生成之后先复制牌组，再加入王牌，最后按需洗牌。
    """
    suits: List[Suit] = Field(default_factory=standard_suits, description="花色列表")
    faces: List[Face] = Field(default_factory=all_faces, description="牌面列表")
    extra_suits: List[Suit] = Field(default_factory=list, description="追加的花色")
    extra_faces: List[Face] = Field(default_factory=list, description="追加的牌面")
    removed_faces: List[Face] = Field(default_factory=list, description="去除的牌面")
    deck_times: int = Field(1, ge=1, description="牌组倍数")
    jokers: int = Field(0, ge=0, description="王牌数量")
    shuffle: bool = Field(False, description="构建后是否洗牌")
    seed: Optional[int] = Field(None, description="洗牌随机种子，用于可重现的结果")

    def generator_options(self) -> List[GeneratorOption]:
        """转换为生成期选项列表"""
        options: List[GeneratorOption] = [with_suits(*self.suits), with_faces(*self.faces)]
        if self.extra_suits:
            options.append(with_extended_suits(*self.extra_suits))
        if self.extra_faces:
            options.append(with_additional_faces(*self.extra_faces))
        if self.removed_faces:
            options.append(without_faces(*self.removed_faces))
        return options

    def deck_options(self) -> List[DeckOption]:
        """转换为生成后选项列表"""
        options: List[DeckOption] = []
        if self.deck_times > 1:
            options.append(with_deck_times(self.deck_times))
        if self.jokers:
            options.append(with_jokers_of_num(self.jokers))
        return options

    @property
    def expected_size(self) -> int:
        """按配置构建出的牌数"""
        suits = len(self.suits) + len(self.extra_suits)
        removed = set(self.removed_faces)
        faces = len([f for f in self.faces + self.extra_faces if f not in removed])
        return suits * faces * self.deck_times + self.jokers

    def build(self, rng: Optional[random.Random] = None) -> Deck:
        """
        按配置构建牌组

        Args:
            rng: 洗牌用的随机数生成器。为None且设置了seed时使用seed创建

        Returns:
            Deck: 构建好的牌组
        """
        generator = CardGenerator(*self.generator_options())
        deck = new_deck(generator, *self.deck_options())
        if self.shuffle:
            if rng is None and self.seed is not None:
                rng = random.Random(self.seed)
            shuffle_deck(deck, rng)
        return deck


class DeckConfigService:
    """牌组配置服务"""

    DEFAULT_PROFILE = "standard"

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._profiles: Dict[str, DeckConfig] = {}
        self._load_default_profiles()

    def _load_default_profiles(self):
        """加载默认配置"""
        nine_to_king = [Face.NINE, Face.TEN, Face.JACK, Face.QUEEN, Face.KING]

        self._profiles = {
            'standard': DeckConfig(),
            'jokers': DeckConfig(jokers=2),
            # 尤克牌: 每个花色9到K加A，共24张
            'euchre': DeckConfig(faces=nine_to_king + [Face.ACE]),
            # 皮纳克尔: 尤克牌的两倍，共48张
            'pinochle': DeckConfig(faces=nine_to_king + [Face.ACE], deck_times=2),
            'double': DeckConfig(deck_times=2),
        }
        self.logger.debug(f"默认牌组配置加载完成: {', '.join(self._profiles)}")

    def get(self, profile: str = DEFAULT_PROFILE, strict: bool = False) -> DeckConfig:
        """
        获取命名配置

        Args:
            profile: 配置名
            strict: 为True时未知配置名抛出异常，否则回退到标准配置

        Returns:
            DeckConfig: 牌组配置

        Raises:
            DeckConfigError: strict模式下配置名不存在时
        """
        config = self._profiles.get(profile)
        if config is None:
            if strict:
                raise DeckConfigError(f"未找到牌组配置 '{profile}'")
            self.logger.warning(f"未找到牌组配置 '{profile}'，使用默认配置")
            config = self._profiles[self.DEFAULT_PROFILE]
        return config

    def register(self, name: str, config: DeckConfig) -> None:
        """注册或覆盖一个命名配置"""
        if not name:
            raise DeckConfigError("配置名不能为空")
        if name in self._profiles:
            self.logger.info(f"覆盖牌组配置 '{name}'")
        self._profiles[name] = config

    def profiles(self) -> List[str]:
        """所有配置名"""
        return list(self._profiles)

    def build(self, profile: str = DEFAULT_PROFILE, rng: Optional[random.Random] = None) -> Deck:
        """按命名配置构建牌组"""
        return self.get(profile).build(rng)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def apply(self) -> None:
        """配置根日志记录器，由应用程序在启动时调用一次"""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format=self.log_format,
        )
