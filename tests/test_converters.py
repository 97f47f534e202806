#!/usr/bin/env python3


# part of the Popts software package
# Copyright 2026 by the Popts authors
# All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.


def preload_local_popts():
    """
    Pre-load the local "popts" module, to preclude finding
    an already-installed one on the path.
    """
    from pathlib import Path
    import sys
    popts_dir = Path(__file__).resolve().parent.parent
    sys.path.insert(1, str(popts_dir))
    import popts
    return popts_dir

popts_dir = preload_local_popts()

import popts
from popts import converters
import unittest


class ConverterTests(unittest.TestCase):
    maxDiff = None

    def assert_parses(self, converter, text, expected):
        value, success = converter.parse(text)
        self.assertTrue(success, f"{converter!r} failed to parse {text!r}")
        self.assertEqual(value, expected)

    def assert_fails(self, converter, text):
        value, success = converter.parse(text)
        self.assertFalse(success, f"{converter!r} shouldn't parse {text!r}, got {value!r}")

    def test_str(self):
        c = converters.converter_for(str)
        self.assert_parses(c, "", "")
        self.assert_parses(c, " spaced out ", " spaced out ")
        self.assertEqual(c.flag_value, "")

    def test_bool(self):
        c = converters.converter_for(bool)
        for text in ("true", "1", "on", "yes", "y", "TRUE", "On", "yEs", "Y"):
            self.assert_parses(c, text, True)
        for text in ("false", "0", "off", "no", "n", "FALSE", "Off", "nO", "N"):
            self.assert_parses(c, text, False)
        self.assertIs(c.flag_value, True)
        self.assertEqual(c.render(True), "true")
        self.assertEqual(c.render(False), "false")

    def test_bool_failure_reports_true(self):
        c = converters.converter_for(bool)
        for text in ("", "2", "yess", "t", "nope", " yes"):
            self.assertEqual(c.parse(text), (True, False))

    def test_int_and_float(self):
        i = converters.converter_for(int)
        self.assert_parses(i, "42", 42)
        self.assert_parses(i, "-7", -7)
        self.assert_fails(i, "4.2")
        self.assert_fails(i, "x")
        self.assertEqual(i.flag_value, 0)
        f = converters.converter_for(float)
        self.assert_parses(f, "4.25", 4.25)
        self.assert_parses(f, "1e3", 1000.0)
        self.assert_fails(f, "four")
        self.assertEqual(f.render(2.5), "2.5")

    def test_durations(self):
        c = converters.converter_for(popts.Duration)
        self.assert_parses(c, "42ns", 42e-9)
        self.assert_parses(c, "43ms", 0.043)
        self.assert_parses(c, "44s", 44.0)
        self.assert_parses(c, "45m", 2700.0)
        self.assert_parses(c, "46h", 165600.0)
        self.assert_parses(c, "47d", 4060800.0)
        self.assert_parses(c, "0s", 0.0)
        value, success = c.parse("47d")
        self.assertIsInstance(value, popts.Duration)

    def test_bad_durations(self):
        c = converters.converter_for(popts.Duration)
        for text in ("42", "xns", "ns", "1.5s", "-5s", "+5s", "1h30m", "5 s", "5S", "5us", "5sec", ""):
            self.assert_fails(c, text)

    def test_durations_too_big_to_convert(self):
        c = converters.converter_for(popts.Duration)
        # overflows a float
        self.assert_fails(c, "1" * 400 + "s")
        # longer than int() accepts
        self.assert_fails(c, "1" * 5000 + "ns")

    def test_render_duration(self):
        c = converters.converter_for(popts.Duration)
        self.assertEqual(c.render(popts.Duration(4060800.0)), "4060800s")
        self.assertEqual(c.render(popts.Duration(0.043)), "0.043s")
        self.assertEqual(c.render(0), "0s")

    def test_unknown_type(self):
        with self.assertRaises(popts.ConfigurationError):
            converters.converter_for(complex)

    def test_function_converter(self):
        def parse_hex(text):
            try:
                return int(text, 16), True
            except ValueError:
                return None, False
        c = popts.FunctionConverter(parse_hex, hex, 0)
        self.assert_parses(c, "ff", 255)
        self.assert_fails(c, "fg")
        self.assertEqual(c.render(255), "0xff")
        self.assertEqual(c.flag_value, 0)

    def test_function_converter_requires_callables(self):
        with self.assertRaises(popts.ConfigurationError):
            popts.FunctionConverter("not callable")
        with self.assertRaises(popts.ConfigurationError):
            popts.FunctionConverter(lambda s: (s, True), render=3)

    def test_register_converter(self):
        class Celsius(float):
            pass
        def parse_celsius(text):
            if not text.endswith("C"):
                return None, False
            try:
                return Celsius(text[:-1]), True
            except ValueError:
                return None, False
        popts.register_converter(Celsius, popts.FunctionConverter(parse_celsius, lambda c: f"{c:g}C", type=Celsius))
        self.addCleanup(converters.registry.pop, Celsius)
        opts = popts.Options(["cmd", "-t", "21.5C"])
        self.assertEqual(opts.make_option("-t", Celsius(20)), 21.5)
        self.assertIn("-t [=20C]", opts.description())

    def test_register_rejects_non_converters(self):
        with self.assertRaises(popts.ConfigurationError):
            popts.register_converter(complex, object())
        self.assertNotIn(complex, converters.registry)

    def test_split(self):
        c = popts.split(",")
        self.assert_parses(c, "a,b,c", ["a", "b", "c"])
        self.assertEqual(c.render(["a", "b"]), "a,b")
        c = popts.split(",", ";", type=int)
        self.assert_parses(c, "1,2;3", [1, 2, 3])
        self.assert_fails(c, "1,two")
        c = popts.split()
        self.assert_parses(c, "x y z", ["x", "y", "z"])
        with self.assertRaises(popts.ConfigurationError):
            popts.split("")

    def test_validate(self):
        c = popts.validate("red", "green")
        self.assert_parses(c, "red", "red")
        self.assert_fails(c, "blue")
        c = popts.validate(1, 2, 3)
        self.assert_parses(c, "2", 2)
        self.assert_fails(c, "4")
        self.assert_fails(c, "two")
        with self.assertRaises(popts.ConfigurationError):
            popts.validate()
        with self.assertRaises(popts.ConfigurationError):
            popts.validate(1, "two")


if __name__ == "__main__":
    unittest.main()
