"""
Arguments module behavioral tests.

Scope
- Validate Arg construction, defaults and boolean coercion.
- Validate metadata constraints (name, descr, short).
- Validate immutability, value equality and __replace__.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from tonbi import Arg


class TestArg(TestCase):
    """Behavioral tests for Arg specifications."""

    def testDefaults(self):
        a = Arg("verbose")
        self.assertEqual(a.name, "verbose")
        self.assertEqual(a.descr, "")
        self.assertFalse(a.required)
        self.assertFalse(a.takes_value)
        self.assertIsNone(a.short)
        self.assertFalse(a.positional)

    def testExplicitMetadata(self):
        a = Arg("file", "File to display", required=True, takes_value=True, short="f")
        self.assertEqual(a.descr, "File to display")
        self.assertTrue(a.required)
        self.assertTrue(a.takes_value)
        self.assertEqual(a.short, "f")

    def testBooleansAreCoerced(self):
        a = Arg("file", required=1, positional="yes")
        self.assertIs(a.required, True)
        self.assertIs(a.positional, True)
        self.assertIs(a.takes_value, False)

    def testShortNoneMeansNoAlias(self):
        self.assertIsNone(Arg("x", short=None).short)

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Arg(1)

    def testNameCannotBeBlank(self):
        with self.assertRaises(ValueError):
            Arg("   ")
        with self.assertRaises(ValueError):
            Arg("")

    def testDescrMustBeString(self):
        with self.assertRaises(TypeError):
            Arg("x", None)

    def testShortMustBeString(self):
        with self.assertRaises(TypeError):
            Arg("x", short=1)

    def testShortMustBeSingleCharacter(self):
        for short in ("", "ab", "-", " "):
            with self.subTest(short=short):
                with self.assertRaises(ValueError):
                    Arg("x", short=short)

    def testImmutable(self):
        a = Arg("x")
        with self.assertRaises(AttributeError):
            a.name = "y"
        with self.assertRaises(AttributeError):
            a.required = True

    def testValueEquality(self):
        self.assertEqual(Arg("x", "d", short="x"), Arg("x", "d", short="x"))
        self.assertNotEqual(Arg("x"), Arg("x", takes_value=True))
        self.assertEqual(len({Arg("x"), Arg("x"), Arg("y")}), 2)

    def testReplaceDerivesModifiedCopy(self):
        a = Arg("name", "Name", short="n")
        b = a.__replace__(takes_value=True)
        self.assertIsNot(a, b)
        self.assertFalse(a.takes_value)
        self.assertTrue(b.takes_value)
        self.assertEqual(b.short, "n")
        self.assertEqual(b.descr, "Name")

    def testReplaceValidates(self):
        with self.assertRaises(ValueError):
            Arg("name").__replace__(short="nn")

    def testRepr(self):
        self.assertEqual(
            repr(Arg("x", short="x")),
            "arg(name='x', descr='', required=False, takes_value=False, short='x', positional=False)",
        )

    def testRichRepr(self):
        fields = dict(Arg("file", positional=True).__rich_repr__())
        self.assertEqual(fields["name"], "file")
        self.assertTrue(fields["positional"])


if __name__ == "__main__":
    unittest.main()
