"""
Values module behavioral tests.

Scope
- Validate the tri-state shape (absent/single/multi) and its truthiness rules.
- Validate indexing, length and iteration over sub-values.
- Validate typed extraction (C-style numeric prefixes, 32-bit range, float vs double)
  and the explicit default path that avoids ConversionError.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argline import Value, Kind, ConversionError, FaultCode


class TestValueShape(TestCase):
    """Truthiness and structure of the three value shapes."""

    def testAbsentIsFalsy(self):
        value = Value()
        self.assertIs(value.kind, Kind.ABSENT)
        self.assertFalse(value)
        self.assertEqual(value.to_string(), "")
        self.assertEqual(len(value), 0)

    def testSingleTruthinessFollowsContent(self):
        self.assertTrue(Value("notes.txt"))
        self.assertFalse(Value(""))
        self.assertIs(Value("").kind, Kind.SINGLE)

    def testEmptyMultiIsStillTruthy(self):
        value = Value(())
        self.assertIs(value.kind, Kind.MULTI)
        self.assertTrue(value)
        self.assertEqual(value.to_string(), "")

    def testMultiReadsFirstItem(self):
        value = Value(["5", "7"])
        self.assertEqual(value.to_string(), "5")
        self.assertEqual(str(value), "5")
        self.assertEqual(len(value), 2)
        self.assertEqual(value.items, ("5", "7"))

    def testIndexingReturnsSingleOrAbsent(self):
        value = Value(["a", "b"])
        self.assertEqual(value[1], Value("b"))
        self.assertIs(value[1].kind, Kind.SINGLE)
        self.assertIs(value[2].kind, Kind.ABSENT)
        self.assertIs(value[-1].kind, Kind.ABSENT)
        self.assertIs(Value("a")[0].kind, Kind.ABSENT)

    def testIterationYieldsSingles(self):
        self.assertEqual(list(Value(["x", "y"])), [Value("x"), Value("y")])
        self.assertEqual(list(Value("x")), [])

    def testSourceIsCopied(self):
        source = ["1", "2"]
        value = Value(source)
        source.append("3")
        self.assertEqual(value.items, ("1", "2"))

    def testEqualityComparesKindAndContent(self):
        self.assertEqual(Value(["a"]), Value(("a",)))
        self.assertNotEqual(Value("a"), Value(["a"]))
        self.assertNotEqual(Value(), Value(""))

    def testNonStringItemsRejected(self):
        with self.assertRaises(TypeError):
            Value([1, 2])

    def testRepr(self):
        self.assertEqual(repr(Value()), "Value()")
        self.assertEqual(repr(Value("a")), "Value('a')")
        self.assertEqual(repr(Value(["a"])), "Value(['a'])")


class TestValueConversion(TestCase):
    """Typed extraction semantics."""

    def testIntAcceptsSignAndWhitespace(self):
        self.assertEqual(Value(" -7").to_int(), -7)
        self.assertEqual(Value("+3").to_int(), 3)

    def testIntIgnoresTrailingText(self):
        self.assertEqual(Value("12px").to_int(), 12)

    def testIntRejectsText(self):
        with self.assertRaises(ConversionError) as context:
            Value("abc").to_int()
        self.assertEqual(context.exception.code, FaultCode.UNCONVERTIBLE_VALUE)
        self.assertIsInstance(context.exception, ValueError)

    def testIntRejectsOutOfRange(self):
        self.assertEqual(Value("2147483647").to_int(), 2147483647)
        with self.assertRaises(ConversionError):
            Value("2147483648").to_int()

    def testDefaultAvoidsRaising(self):
        self.assertIsNone(Value("abc").to_int(None))
        self.assertEqual(Value().to_double(1.5), 1.5)
        self.assertEqual(Value("x").to_float(0.0), 0.0)

    def testDoubleKeepsFullPrecision(self):
        self.assertEqual(Value("0.1").to_double(), 0.1)
        self.assertEqual(Value("1e3").to_double(), 1000.0)
        self.assertEqual(Value(".5x").to_double(), 0.5)

    def testFloatRoundsToSinglePrecision(self):
        self.assertNotEqual(Value("0.1").to_float(), 0.1)
        self.assertAlmostEqual(Value("0.1").to_float(), 0.1, places=6)

    def testFloatOverflowRejected(self):
        self.assertEqual(Value("1e39").to_double(), 1e39)
        with self.assertRaises(ConversionError):
            Value("1e39").to_float()

    def testDoubleOverflowRejected(self):
        with self.assertRaises(ConversionError):
            Value("1e999").to_double()
        self.assertIsNone(Value("-1e999").to_double(None))
        self.assertEqual(Value("inf").to_double(), float("inf"))
        self.assertEqual(Value("-Infinity").to_double(), float("-inf"))

    def testConversionOnMultiUsesFirstItem(self):
        self.assertEqual(Value(["4", "x"]).to_int(), 4)

    def testConversionOnAbsentFails(self):
        with self.assertRaises(ConversionError):
            Value().to_int()


if __name__ == "__main__":
    unittest.main()
