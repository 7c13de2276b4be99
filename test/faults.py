"""
Tests for fault codes, fault rendering and the trigger() surface.
"""
import io
import sys
import unittest
from contextlib import redirect_stderr
from unittest import TestCase, mock

from rich.console import Console

from tonbi.faults import *


def make_fault(**options):
    return UnknownOptionError(
        "unknown option '--zzz' at first position",
        title="unknown option",
        code=FaultCode.UNKNOWN_OPTION,
        input="zzz",
        index=1,
        suggestions=["--name"],
        hint="did you mean '--name'?",
        **options,
    )


class FaultCodeTest(TestCase):
    def testStableValues(self):
        self.assertEqual(FaultCode.UNKNOWN_OPTION, 11112)
        self.assertEqual(FaultCode.UNKNOWN_SHORT_OPTION, 11113)
        self.assertEqual(FaultCode.MISSING_OPTION_VALUE, 11117)
        self.assertEqual(FaultCode.UNKNOWN_ARGUMENT, 11121)
        self.assertEqual(FaultCode.MISSING_REQUIRED_ARGUMENT, 11125)
        self.assertEqual(FaultCode.SHADOWED_NAME, 12113)

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "11112")

    def testNormalizeUsesHostCodes(self):
        main = sys.modules["__main__"]
        with mock.patch.object(main, "__codes__", {FaultCode.UNKNOWN_OPTION: "E-OPT"}, create=True):
            self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "E-OPT")
            self.assertEqual(FaultCode.UNKNOWN_ARGUMENT.normalize(), "11121")

    def testGetdoc(self):
        main = sys.modules["__main__"]
        self.assertIsNone(getdoc(FaultCode.UNKNOWN_OPTION))
        with mock.patch.object(main, "__docs__", {FaultCode.UNKNOWN_OPTION: "see --help"}, create=True):
            self.assertEqual(getdoc(FaultCode.UNKNOWN_OPTION), "see --help")

    def testGetdocRejectsPlainIntegers(self):
        with self.assertRaises(TypeError):
            getdoc(11112)


class ParseErrorTest(TestCase):
    def testHierarchy(self):
        for kind in (
            UnknownOptionError,
            UnknownShortOptionError,
            MissingOptionValueError,
            UnknownArgumentError,
            MissingRequiredArgumentError,
        ):
            with self.subTest(kind=kind):
                self.assertTrue(issubclass(kind, ParseError))
                self.assertTrue(issubclass(kind, Exception))

    def testAccessors(self):
        fault = make_fault()
        self.assertEqual(str(fault), "unknown option '--zzz' at first position")
        self.assertEqual(fault.input, "zzz")
        self.assertEqual(fault.index, 1)
        self.assertIs(fault.code, FaultCode.UNKNOWN_OPTION)
        self.assertEqual(fault.hint, "did you mean '--name'?")
        self.assertEqual(fault.suggestions, ("--name",))

    def testOptionsAreReadOnly(self):
        with self.assertRaises(TypeError):
            make_fault().options["input"] = "other"

    def testReplaceMergesOptions(self):
        fault = make_fault()
        replaced = fault.__replace__(prog="greeter", shell=True)
        self.assertIsInstance(replaced, UnknownOptionError)
        self.assertEqual(replaced.message, fault.message)
        self.assertEqual(replaced.options["prog"], "greeter")
        self.assertEqual(replaced.input, "zzz")
        self.assertNotIn("prog", fault.options)

    def testRichRendering(self):
        file = io.StringIO()
        Console(file=file, width=200).print(make_fault(prog="greeter"), soft_wrap=True)
        self.assertEqual(
            file.getvalue().splitlines(),
            [
                "[ greeter — 11112 | Unknown Option ]",
                "unknown option '--zzz' at first position",
                " → did you mean '--name'?",
            ],
        )


class TriggerTest(TestCase):
    def testRaisesOutsideShellMode(self):
        with self.assertRaises(UnknownOptionError) as context:
            trigger(make_fault(), prog="greeter")
        self.assertEqual(context.exception.options["prog"], "greeter")

    def testPrintsAndExitsInShellMode(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as context:
            trigger(make_fault(), prog="greeter", shell=True)
        self.assertEqual(context.exception.code, 1)
        self.assertIn("unknown option '--zzz' at first position", stderr.getvalue())

    def testWarningIsEmitted(self):
        with self.assertWarns(ShadowedNameWarning):
            trigger(ShadowedNameWarning("argument '--x' of 'tool' is already declared"))

    def testWarningIsPrintedInShellMode(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            trigger(ShadowedNameWarning("argument '--x' of 'tool' is already declared", title="shadowed argument"), shell=True)
        self.assertIn("argument '--x' of 'tool' is already declared", stderr.getvalue())

    def testRejectsPlainObjects(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("plain"))


if __name__ == "__main__":
    unittest.main()
