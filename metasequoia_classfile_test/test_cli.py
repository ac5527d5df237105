"""
测试：诊断命令
"""

import os
import subprocess
import sys
import unittest

from click.testing import CliRunner

from metasequoia_classfile import __version__
from metasequoia_classfile.cli import main


class CliTest(unittest.TestCase):
    """测试用例"""

    def setUp(self):
        self.runner = CliRunner()

    def test_render(self):
        result = self.runner.invoke(main, ["25"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("public static final\n", result.output)

    def test_empty(self):
        result = self.runner.invoke(main, ["0"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("\n", result.output)

    def test_not_number(self):
        result = self.runner.invoke(main, ["abc"])
        self.assertNotEqual(0, result.exit_code)
        self.assertNotIn("public", result.output)

    def test_domain(self):
        result = self.runner.invoke(main, ["--domain", "method", "1025"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("public abstract\n", result.output)

    def test_strict(self):
        result = self.runner.invoke(main, ["4121"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("public static final\n", result.output)

        result = self.runner.invoke(main, ["--strict", "4121"])
        self.assertEqual(1, result.exit_code)
        self.assertIn("0x1000", result.output)
        self.assertNotIn("public", result.output)

    def test_negative(self):
        result = self.runner.invoke(main, ["-1"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("public protected private static final transient volatile\n", result.output)

        result = self.runner.invoke(main, ["-d", "class", "-1"])
        self.assertEqual(0, result.exit_code)
        self.assertEqual("public abstract final\n", result.output)

    def test_module(self):
        project_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        process = subprocess.run([sys.executable, "-m", "metasequoia_classfile", "25"],
                                 cwd=project_path, capture_output=True, text=True)
        self.assertEqual(0, process.returncode)
        self.assertEqual("public static final", process.stdout.strip())

    def test_version(self):
        result = self.runner.invoke(main, ["--version"])
        self.assertEqual(0, result.exit_code)
        self.assertIn(__version__, result.output)


if __name__ == "__main__":
    unittest.main()
