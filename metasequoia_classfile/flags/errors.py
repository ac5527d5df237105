"""
访问标志相关异常
"""

__all__ = [
    "DomainDefinitionError",
    "UnknownFlagError",
]


class DomainDefinitionError(Exception):
    """标志域定义异常（例如两个标志定义的二进制位存在重叠）"""


class UnknownFlagError(Exception):
    """严格模式下，标志集合中包含标志域之外的二进制位"""
