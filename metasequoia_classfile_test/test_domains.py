"""
测试：字段、方法、类的访问标志域
"""

import unittest

from metasequoia_classfile.flags import (AccessFlag, CLASS_ACCESS_FLAGS, FIELD_ACCESS_FLAGS, METHOD_ACCESS_FLAGS,
                                         NESTED_CLASS_ACCESS_FLAGS, FlagSet, get_domain)


class DomainsTest(unittest.TestCase):
    """测试用例"""

    def test_field(self):
        self.assertEqual("public static final", FlagSet(25, FIELD_ACCESS_FLAGS).canonical_name())
        self.assertEqual("private transient volatile", FlagSet(0x00C2, FIELD_ACCESS_FLAGS).canonical_name())
        # ACC_SYNTHETIC | ACC_ENUM 不会被渲染
        flag_set = FlagSet(0x4019 | AccessFlag.ACC_SYNTHETIC, FIELD_ACCESS_FLAGS)
        self.assertEqual("public static final", flag_set.canonical_name())
        self.assertEqual(0x5019, flag_set.value)

    def test_method(self):
        self.assertEqual("public abstract", FlagSet(0x0401, METHOD_ACCESS_FLAGS).canonical_name())
        self.assertEqual("protected static final synchronized native strictfp",
                         FlagSet(0x093C, METHOD_ACCESS_FLAGS).canonical_name())
        # ACC_BRIDGE | ACC_VARARGS 不会被渲染
        self.assertEqual("public", FlagSet(0x00C1, METHOD_ACCESS_FLAGS).canonical_name())

    def test_class(self):
        # ACC_SUPER 不会被渲染
        self.assertEqual("public final", FlagSet(0x0031, CLASS_ACCESS_FLAGS).canonical_name())
        self.assertEqual("private static", FlagSet(0x000A, NESTED_CLASS_ACCESS_FLAGS).canonical_name())

    def test_parse(self):
        self.assertEqual(0x0019, FlagSet.parse("static final public", FIELD_ACCESS_FLAGS).value)
        with self.assertRaises(KeyError):
            FlagSet.parse("public native", FIELD_ACCESS_FLAGS)

    def test_get_domain(self):
        self.assertIs(FIELD_ACCESS_FLAGS, get_domain("field"))
        self.assertIs(METHOD_ACCESS_FLAGS, get_domain("method"))
        self.assertIs(CLASS_ACCESS_FLAGS, get_domain("class"))
        self.assertIs(NESTED_CLASS_ACCESS_FLAGS, get_domain("nested-class"))
        with self.assertRaises(KeyError):
            get_domain("module")


if __name__ == "__main__":
    unittest.main()
