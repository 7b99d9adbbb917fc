"""
Registry module behavioral tests.

Scope
- Validate naming rules for arguments, long options and short options.
- Validate uniqueness (names, short names, the single pack).
- Validate option ordering (registration order, not lexical order) and lookup.

Conventions
- Test method names follow CamelCase per project convention.
- The registry raises; the Parser facade is covered in test_parser.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argline.faults import (
    FaultCode,
    InvalidArgumentNameError,
    DuplicateArgumentError,
    DuplicatePackError,
    InvalidOptionNameError,
    DuplicateOptionError,
    InvalidShortNameError,
    DuplicateShortNameError,
    InvalidArityError,
)
from argline.registry import Argument, Option, Registry


class TestArguments(TestCase):
    """Positional argument registration."""

    def setUp(self):
        self.registry = Registry()

    def testValidNamesRegisterOnce(self):
        for name in ("file", "F", "a1", "snake_case", "x" * 32):
            with self.subTest(name=name):
                self.assertEqual(self.registry.add_argument(name), Argument(name))
                with self.assertRaises(DuplicateArgumentError) as context:
                    self.registry.add_argument(name)
                self.assertEqual(context.exception.name, name)

    def testInvalidNamesRejected(self):
        for name in ("", "1file", "_file", "my-file", "file name", "x" * 33, "fïle"):
            with self.subTest(name=name):
                with self.assertRaises(InvalidArgumentNameError) as context:
                    self.registry.add_argument(name)
                self.assertEqual(context.exception.code, FaultCode.INVALID_ARGUMENT_NAME)
        self.assertEqual(self.registry.arguments, ())

    def testDeclarationOrderKept(self):
        self.registry.add_argument("source", "from here")
        self.registry.add_argument_pack("rest", numeric=True)
        self.registry.add_argument("target")
        self.assertEqual(
            self.registry.arguments,
            (Argument("source", "from here"), Argument("rest", "", True, True), Argument("target"))
        )

    def testSecondPackAlwaysRejected(self):
        self.registry.add_argument_pack("files")
        self.assertTrue(self.registry.has_pack)
        for name in ("more", "files", "1bad", ""):
            with self.subTest(name=name):
                with self.assertRaises(DuplicatePackError):
                    self.registry.add_argument_pack(name)

    def testPackNameMustBeUniqueAndValid(self):
        self.registry.add_argument("file")
        with self.assertRaises(DuplicateArgumentError):
            self.registry.add_argument_pack("file")
        with self.assertRaises(InvalidArgumentNameError):
            self.registry.add_argument_pack("bad-name")
        self.assertFalse(self.registry.has_pack)


class TestOptions(TestCase):
    """Named option registration."""

    def setUp(self):
        self.registry = Registry()

    def testOptionStoredWithShortName(self):
        option = self.registry.add_option("--lines", 1, "-l", "line count", True)
        self.assertEqual(option, Option("--lines", "-l", "line count", 1, True, 0))
        self.assertIs(self.registry.option("--lines"), option)
        self.assertIs(self.registry.option("-l"), option)
        self.assertIsNone(self.registry.option("--nope"))

    def testLongNameRules(self):
        self.assertTrue(self.registry.add_option("--" + "x" * 30))
        for name in ("lines", "-lines", "--", "--1x", "--a-b", "--" + "x" * 31):
            with self.subTest(name=name):
                with self.assertRaises(InvalidOptionNameError):
                    self.registry.add_option(name)

    def testShortNameRules(self):
        self.assertTrue(self.registry.add_option("--long", 0, "-" + "s" * 15))
        for index, short in enumerate(("s", "--s", "-", "-1", "-" + "s" * 16)):
            with self.subTest(short=short):
                with self.assertRaises(InvalidShortNameError):
                    self.registry.add_option("--opt%d" % index, 0, short)

    def testDuplicateLongNameCheckedFirst(self):
        self.registry.add_option("--back", 0, "-b")
        with self.assertRaises(DuplicateOptionError) as context:
            self.registry.add_option("--back", 0, "-b")
        self.assertEqual(context.exception.name, "--back")

    def testDuplicateShortNameRejected(self):
        self.registry.add_option("--back", 0, "-b")
        with self.assertRaises(DuplicateShortNameError) as context:
            self.registry.add_option("--bottom", 0, "-b")
        self.assertEqual(context.exception.name, "-b")
        self.assertIsNone(self.registry.option("--bottom"))

    def testArityMustBeNonNegativeInteger(self):
        for arity in (-1, 1.5, "2", True):
            with self.subTest(arity=arity):
                with self.assertRaises(InvalidArityError):
                    self.registry.add_option("--opt", arity)

    def testOptionsListedInRegistrationOrder(self):
        for name in ("--zeta", "--alpha", "--mid"):
            self.registry.add_option(name)
        self.assertEqual([option.name for option in self.registry.options], ["--zeta", "--alpha", "--mid"])
        self.assertEqual([option.index for option in self.registry.options], [0, 1, 2])

    def testIsRegistered(self):
        self.registry.add_argument("file")
        self.registry.add_option("--back", 0, "-b")
        for name in ("file", "--back", "-b"):
            self.assertTrue(self.registry.is_registered(name))
        self.assertFalse(self.registry.is_registered("--file"))


if __name__ == "__main__":
    unittest.main()
