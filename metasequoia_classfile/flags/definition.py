"""
标志定义与标志域

标志域（FlagDomain）声明某一类结构元素（字段、方法、类）全部合法的访问标志，声明顺序即源码中修饰符的规范顺序。
"""

import dataclasses
from typing import Dict, Iterable, Iterator, Tuple, Union

from metasequoia_classfile.common import LOGGER
from metasequoia_classfile.flags.errors import DomainDefinitionError

__all__ = [
    "FlagDefinition",
    "FlagDomain",
]


@dataclasses.dataclass(frozen=True, slots=True)
class FlagDefinition:
    """单个标志的定义：二进制位、源码关键字以及在标志域中的渲染顺序"""

    bit_value: int = dataclasses.field(kw_only=True)  # 标志对应的二进制位（有且仅有一位为 1）
    keyword: str = dataclasses.field(kw_only=True)  # 源码中的关键字，例如 public
    order: int = dataclasses.field(kw_only=True)  # 在标志域规范顺序中的位置

    def __post_init__(self):
        if self.bit_value <= 0 or self.bit_value & (self.bit_value - 1) != 0:
            raise DomainDefinitionError(f"标志 {self.keyword!r} 的值 {self.bit_value:#06x} 不是单个二进制位")
        if not self.keyword:
            raise DomainDefinitionError(f"标志 {self.bit_value:#06x} 缺少关键字")

    def __repr__(self) -> str:
        return f"<FlagDefinition keyword={self.keyword}, bit_value={self.bit_value:#06x}, order={self.order}>"


class FlagDomain:
    """标志域：某一类结构元素全部合法标志的有序注册表

    在构造时检查标志定义之间的二进制位不重叠、关键字不重复；构造完成后不可修改。
    """

    __slots__ = ("_name", "_definitions", "_keyword_hash", "_mask")

    def __init__(self, name: str, flags: Iterable[Tuple[int, str]]):
        definitions = []
        keyword_hash: Dict[str, FlagDefinition] = {}
        mask = 0
        for order, (bit_value, keyword) in enumerate(flags):
            definition = FlagDefinition(bit_value=bit_value, keyword=keyword, order=order)
            if mask & bit_value:
                owner = next(elem for elem in definitions if elem.bit_value & bit_value)
                raise DomainDefinitionError(f"标志域 {name} 中 {keyword!r} 与 {owner.keyword!r} "
                                            f"的二进制位重叠: {bit_value:#06x}")
            if keyword in keyword_hash:
                raise DomainDefinitionError(f"标志域 {name} 中关键字重复: {keyword!r}")
            definitions.append(definition)
            keyword_hash[keyword] = definition
            mask |= bit_value

        self._name = name
        self._definitions: Tuple[FlagDefinition, ...] = tuple(definitions)
        self._keyword_hash = keyword_hash
        self._mask = mask
        LOGGER.debug(f"定义标志域 {name}: {[elem.keyword for elem in definitions]}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def mask(self) -> int:
        """所有合法标志二进制位的并集"""
        return self._mask

    def definitions(self) -> Tuple[FlagDefinition, ...]:
        """按规范顺序返回全部标志定义"""
        return self._definitions

    def get(self, keyword: str) -> FlagDefinition:
        """根据关键字获取标志定义"""
        if keyword not in self._keyword_hash:
            raise KeyError(f"{keyword} 不是标志域 {self._name} 中的标志")
        return self._keyword_hash[keyword]

    def parse_value(self, text: str) -> int:
        """将以空白分隔的修饰符文本转换为二进制位掩码，与修饰符在文本中的顺序无关"""
        value = 0
        for keyword in text.split():
            value |= self.get(keyword).bit_value
        return value

    def unknown_bits(self, value: int) -> int:
        """返回 value 中不对应任何标志定义的二进制位"""
        return value & ~self._mask

    def __getitem__(self, keyword: str) -> FlagDefinition:
        return self.get(keyword)

    def __contains__(self, item: Union[FlagDefinition, str]) -> bool:
        if isinstance(item, FlagDefinition):
            return self._keyword_hash.get(item.keyword) == item
        return item in self._keyword_hash

    def __iter__(self) -> Iterator[FlagDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"<FlagDomain name={self._name}, flags={[elem.keyword for elem in self._definitions]}>"
