"""
字段、方法、类的访问标志域

只包含能够在 Java 源码中以修饰符形式出现的标志；ACC_SYNTHETIC、ACC_BRIDGE 等标志不在标志域中，不会被渲染。
"""

from typing import Dict, List, Tuple

from metasequoia_classfile.flags.access_flag import AccessFlag, Modifier
from metasequoia_classfile.flags.definition import FlagDomain

__all__ = [
    "FIELD_ACCESS_FLAGS",
    "METHOD_ACCESS_FLAGS",
    "CLASS_ACCESS_FLAGS",
    "NESTED_CLASS_ACCESS_FLAGS",
    "DOMAINS",
    "get_domain",
]


def _make_domain(name: str, pairs: List[Tuple[AccessFlag, Modifier]]) -> FlagDomain:
    return FlagDomain(name, [(int(access_flag), modifier.value) for access_flag, modifier in pairs])


# 字段的访问标志
FIELD_ACCESS_FLAGS = _make_domain("field", [
    (AccessFlag.ACC_PUBLIC, Modifier.PUBLIC),
    (AccessFlag.ACC_PROTECTED, Modifier.PROTECTED),
    (AccessFlag.ACC_PRIVATE, Modifier.PRIVATE),
    (AccessFlag.ACC_STATIC, Modifier.STATIC),
    (AccessFlag.ACC_FINAL, Modifier.FINAL),
    (AccessFlag.ACC_TRANSIENT, Modifier.TRANSIENT),
    (AccessFlag.ACC_VOLATILE, Modifier.VOLATILE),
])

# 方法的访问标志
METHOD_ACCESS_FLAGS = _make_domain("method", [
    (AccessFlag.ACC_PUBLIC, Modifier.PUBLIC),
    (AccessFlag.ACC_PROTECTED, Modifier.PROTECTED),
    (AccessFlag.ACC_PRIVATE, Modifier.PRIVATE),
    (AccessFlag.ACC_ABSTRACT, Modifier.ABSTRACT),
    (AccessFlag.ACC_STATIC, Modifier.STATIC),
    (AccessFlag.ACC_FINAL, Modifier.FINAL),
    (AccessFlag.ACC_SYNCHRONIZED, Modifier.SYNCHRONIZED),
    (AccessFlag.ACC_NATIVE, Modifier.NATIVE),
    (AccessFlag.ACC_STRICT, Modifier.STRICTFP),
])

# 顶层类的访问标志
CLASS_ACCESS_FLAGS = _make_domain("class", [
    (AccessFlag.ACC_PUBLIC, Modifier.PUBLIC),
    (AccessFlag.ACC_ABSTRACT, Modifier.ABSTRACT),
    (AccessFlag.ACC_FINAL, Modifier.FINAL),
])

# 内部类的访问标志（InnerClasses 属性中的 inner_class_access_flags）
NESTED_CLASS_ACCESS_FLAGS = _make_domain("nested-class", [
    (AccessFlag.ACC_PUBLIC, Modifier.PUBLIC),
    (AccessFlag.ACC_PROTECTED, Modifier.PROTECTED),
    (AccessFlag.ACC_PRIVATE, Modifier.PRIVATE),
    (AccessFlag.ACC_ABSTRACT, Modifier.ABSTRACT),
    (AccessFlag.ACC_STATIC, Modifier.STATIC),
    (AccessFlag.ACC_FINAL, Modifier.FINAL),
])

# 标志域名称到标志域的映射关系
DOMAINS: Dict[str, FlagDomain] = {
    domain.name: domain
    for domain in (FIELD_ACCESS_FLAGS, METHOD_ACCESS_FLAGS, CLASS_ACCESS_FLAGS, NESTED_CLASS_ACCESS_FLAGS)
}


def get_domain(name: str) -> FlagDomain:
    """根据名称获取标志域"""
    if name not in DOMAINS:
        raise KeyError(f"{name} 不是已知的标志域，可选值: {list(DOMAINS)}")
    return DOMAINS[name]
