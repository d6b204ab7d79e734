"""
牌组构建异常定义
区分选项参数错误和选项类型错误
"""


class CardDeckError(Exception):
    """牌组库基础异常类"""
    pass


class InvalidOptionError(CardDeckError, ValueError):
    """选项参数超出定义域异常"""
    pass


class UnknownOptionError(CardDeckError, TypeError):
    """无法识别的选项类型异常"""
    pass


class DeckConfigError(CardDeckError):
    """牌组配置错误异常"""
    pass
