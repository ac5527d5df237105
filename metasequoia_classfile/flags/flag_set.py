"""
访问标志集合

FlagSet 为只读的标志集合，MutableFlagSet 为可修改的标志集合，两者之间没有继承关系，共同实现 FlagQuery 中的查询能力。
"""

import abc
from typing import List

from metasequoia_classfile.common import LOGGER
from metasequoia_classfile.flags.definition import FlagDefinition, FlagDomain
from metasequoia_classfile.flags.errors import UnknownFlagError

__all__ = [
    "FlagQuery",
    "FlagSet",
    "MutableFlagSet",
]


def _check_value(value: int, domain: FlagDomain, strict: bool) -> int:
    """检查标志集合的原始值；宽松模式下保留未知的二进制位，严格模式下抛出异常"""
    unknown_bits = domain.unknown_bits(value)
    if unknown_bits:
        if strict:
            raise UnknownFlagError(f"值 {value:#06x} 中包含标志域 {domain.name} 之外的二进制位: {unknown_bits:#06x}")
        LOGGER.debug(f"忽略标志域 {domain.name} 之外的二进制位: value={value:#06x}, unknown={unknown_bits:#06x}")
    return value


class FlagQuery(abc.ABC):
    """标志集合的查询能力"""

    __slots__ = ("_domain",)

    def __init__(self, domain: FlagDomain):
        self._domain = domain

    @property
    def domain(self) -> FlagDomain:
        return self._domain

    @property
    @abc.abstractmethod
    def value(self) -> int:
        """类文件中表示该标志集合的原始值（所有标志二进制位的并集，包括未知的二进制位）"""

    @property
    def unknown_bits(self) -> int:
        return self._domain.unknown_bits(self.value)

    def contains(self, flag: FlagDefinition) -> bool:
        """返回标志是否在集合中"""
        return (self.value & flag.bit_value) == flag.bit_value

    def flags(self) -> List[FlagDefinition]:
        """按标志域的规范顺序返回集合中的标志"""
        return [flag for flag in self._domain.definitions() if self.contains(flag)]

    def canonical_name(self) -> str:
        """返回该标志集合在 Java 源码中的表示，例如 "private static final"

        关键字顺序只取决于标志域的声明顺序，与标志加入集合的顺序无关；空集合返回空字符串。
        """
        return " ".join(flag.keyword for flag in self.flags())

    def generate(self) -> str:
        """生成修饰符的标准格式代码"""
        return self.canonical_name()

    def __contains__(self, flag: FlagDefinition) -> bool:
        return self.contains(flag)

    def __str__(self) -> str:
        return self.canonical_name()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} domain={self._domain.name}, value={self.value:#06x}>"


class FlagSet(FlagQuery):
    """只读的标志集合，构造后不再修改，可以在多个线程之间共享读取"""

    __slots__ = ("_value",)

    def __init__(self, value: int, domain: FlagDomain, *, strict: bool = False):
        super().__init__(domain)
        self._value = _check_value(value, domain, strict)

    @staticmethod
    def parse(text: str, domain: FlagDomain) -> "FlagSet":
        """根据修饰符文本构造标志集合，例如 "public static final" """
        return FlagSet(domain.parse_value(text), domain)

    @property
    def value(self) -> int:
        return self._value

    def to_mutable(self) -> "MutableFlagSet":
        """返回内容相同的可修改标志集合"""
        return MutableFlagSet(self._value, self._domain)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return NotImplemented
        return self._domain is other._domain and self._value == other._value

    def __hash__(self) -> int:
        return hash((id(self._domain), self._value))


class MutableFlagSet(FlagQuery):
    """可修改的标志集合，供解析器或代码生成器逐个添加、移除标志

    不检查标志组合是否合法（例如同时包含 public 和 private），合法性由外部的语义检查负责。
    """

    __slots__ = ("_value", "_strict")

    def __init__(self, value: int, domain: FlagDomain, *, strict: bool = False):
        super().__init__(domain)
        self._value = _check_value(value, domain, strict)
        self._strict = strict

    @property
    def value(self) -> int:
        return self._value

    def add(self, flag: FlagDefinition) -> None:
        """将标志添加到集合中（幂等）"""
        if self._strict and flag not in self._domain:
            raise UnknownFlagError(f"{flag.keyword} 不是标志域 {self._domain.name} 中的标志")
        self._value |= flag.bit_value

    def remove(self, flag: FlagDefinition) -> None:
        """将标志从集合中移除（幂等）"""
        self._value &= ~flag.bit_value

    def freeze(self) -> FlagSet:
        """返回当前内容的只读快照"""
        return FlagSet(self._value, self._domain, strict=self._strict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableFlagSet):
            return NotImplemented
        return self._domain is other._domain and self._value == other._value

    __hash__ = None
