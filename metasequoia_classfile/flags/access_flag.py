"""
类文件中的访问标志与 Java 源码中的修饰符
"""

import enum

__all__ = [
    "AccessFlag",
    "Modifier",
]


class AccessFlag(enum.IntEnum):
    """类文件中 access_flags 的二进制位

    https://docs.oracle.com/javase/specs/jvms/se21/html/jvms-4.html#jvms-4.1-200-E.1
    同一个二进制位在不同类型的结构元素中含义不同（例如 0x0040 在字段中为 volatile，在方法中为 bridge），因此存在别名。
    """

    ACC_PUBLIC = 0x0001
    ACC_PRIVATE = 0x0002
    ACC_PROTECTED = 0x0004
    ACC_STATIC = 0x0008
    ACC_FINAL = 0x0010
    ACC_SUPER = 0x0020  # 类
    ACC_SYNCHRONIZED = 0x0020  # 方法
    ACC_VOLATILE = 0x0040  # 字段
    ACC_BRIDGE = 0x0040  # 方法
    ACC_TRANSIENT = 0x0080  # 字段
    ACC_VARARGS = 0x0080  # 方法
    ACC_NATIVE = 0x0100
    ACC_INTERFACE = 0x0200
    ACC_ABSTRACT = 0x0400
    ACC_STRICT = 0x0800
    ACC_SYNTHETIC = 0x1000
    ACC_ANNOTATION = 0x2000
    ACC_ENUM = 0x4000
    ACC_MODULE = 0x8000  # 类
    ACC_MANDATED = 0x8000  # 参数


class Modifier(enum.Enum):
    """修饰符

    https://github.com/openjdk/jdk/blob/master/src/java.compiler/share/classes/javax/lang/model/element/Modifier.java
    成员的声明顺序与 java.lang.reflect.Modifier#toString 输出的规范顺序一致
    """

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    STRICTFP = "strictfp"
