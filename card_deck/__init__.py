#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
扑克牌组构建库
提供纯内存的牌组构建与编辑功能

模块结构：
- core: 牌的数据模型、生成器、配置选项、牌组、排序与洗牌
- config: 声明式牌组配置、命名配置和日志配置
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .config import DeckConfig, DeckConfigService, LoggingConfig

__version__ = "1.0.0"

__all__ = list(_core_all) + ['DeckConfig', 'DeckConfigService', 'LoggingConfig']
