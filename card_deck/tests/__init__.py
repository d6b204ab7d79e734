"""
Tests - 牌组库测试

unit: 各核心模块的单元测试
property: 基于hypothesis的属性测试
"""
