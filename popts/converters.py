# please leave this copyright notice in binary distributions.
license = """
popts/converters.py
part of the Popts software package
Copyright 2026 by the Popts authors
All rights reserved.

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included
in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,
DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

import big.all as big
import builtins
import re

from .exceptions import ConfigurationError


##
## A converter turns the text of one command-line token
## into a value, and a value back into text (for the
## default shown by Options.description()).
##
## The contract is two methods and one attribute:
##
##     parse(text) -> (value, success)
##         On failure, value is meaningless and the text
##         is discarded.  parse() never raises for bad input.
##
##     render(value) -> str
##
##     flag_value
##         The value stored every time a *flag* of this
##         type is found on the command-line.
##
## Converters are looked up by type in the "registry" dict
## below.  You can add your own with register_converter(),
## or pass a converter straight to Options.make_option().
##

class Converter:
    type = None
    flag_value = None

    def __repr__(self):
        return f"<{self.__class__.__name__} type={self.type!r}>"

    def parse(self, text):
        raise NotImplementedError(f"{self.__class__.__name__} must implement parse()")

    def render(self, value):
        return str(value)


class StrConverter(Converter):
    type = str
    flag_value = ''

    def parse(self, text):
        return text, True


# case-insensitive
bool_true_strings = frozenset(("true", "1", "on", "yes", "y"))
bool_false_strings = frozenset(("false", "0", "off", "no", "n"))

class BoolConverter(Converter):
    type = bool
    flag_value = True

    def parse(self, text):
        lowered = text.lower()
        if lowered in bool_true_strings:
            return True, True
        if lowered in bool_false_strings:
            return False, True
        # failure still reports True as the value.
        # callers must check success!
        return True, False

    def render(self, value):
        return "true" if value else "false"


class CallableConverter(Converter):
    """
    Parses by calling self.type on the text; ValueError
    (or TypeError) means failure.
    """
    def parse(self, text):
        try:
            return self.type(text), True
        except (ValueError, TypeError):
            return None, False

class IntConverter(CallableConverter):
    type = int
    flag_value = 0

class FloatConverter(CallableConverter):
    type = float
    flag_value = 0.0


class Duration(float):
    """
    The type tag for duration options.

    A Duration is a float number of seconds.
    """
    def __repr__(self):
        return f"Duration({float(self)!r})"

nanoseconds_per_unit = {
    "ns": 1,
    "ms": 1_000_000,
    "s":  1_000_000_000,
    "m":  60 * 1_000_000_000,
    "h":  60 * 60 * 1_000_000_000,
    "d":  24 * 60 * 60 * 1_000_000_000,
    }

duration_re = re.compile("([0-9]+)(ns|ms|s|m|h|d)")

class DurationConverter(Converter):
    """
    Parses "<integer><unit>", where unit is one of
    ns, ms, s, m, h, or d.  No fractions, no signs,
    no combined units ("1h30m" is an error).
    """
    type = Duration
    flag_value = Duration(0.0)

    def parse(self, text):
        match = duration_re.fullmatch(text)
        if not match:
            return None, False
        count, unit = match.groups()
        # integer math first, one rounding at the end.
        # int() refuses very long digit strings, and the
        # division overflows once the count exceeds a float.
        try:
            nanoseconds = int(count) * nanoseconds_per_unit[unit]
            return Duration(nanoseconds / 1_000_000_000), True
        except (ValueError, OverflowError):
            return None, False

    def render(self, value):
        text = repr(float(value))
        if text.endswith(".0"):
            text = text[:-2]
        return text + "s"


class FunctionConverter(Converter):
    """
    Wraps a caller-supplied pair of functions:

        parse(text) -> (value, success)
        render(value) -> str

    flag_value is what a flag of this type stores.
    """
    def __init__(self, parse, render=str, flag_value=None, *, type=None):
        if not callable(parse):
            raise ConfigurationError(f"FunctionConverter: parse {parse!r} is not callable")
        if not callable(render):
            raise ConfigurationError(f"FunctionConverter: render {render!r} is not callable")
        self._parse = parse
        self._render = render
        self.flag_value = flag_value
        self.type = type

    def parse(self, text):
        value, success = self._parse(text)
        return value, bool(success)

    def render(self, value):
        return self._render(value)


class SplitConverter(Converter):
    """
    Splits the text on any of several separators,
    then converts every field with an inner converter.
    Fails if any field fails.
    """
    type = list

    def __init__(self, separators, inner, strip):
        self.separators = separators
        self.inner = inner
        self.strip = strip
        self.flag_value = []

    def parse(self, text):
        values = []
        for field in big.multisplit(text, self.separators or None, strip=self.strip):
            value, success = self.inner.parse(field)
            if not success:
                return None, False
            values.append(value)
        return values, True

    def render(self, value):
        separator = self.separators[0] if self.separators else " "
        return separator.join(self.inner.render(v) for v in value)


def split(*separators, type=str, strip=False):
    """
    Creates a converter that splits a token
    on one or more separator strings, converting
    every field with the converter for "type".

    If you don't supply any separators, splits on
    any whitespace.

    If strip is True, also strips the separators
    from the beginning and end of the token.
    """
    if not all((s and isinstance(s, str)) for s in separators):
        raise ConfigurationError("split(): every separator must be a non-empty string")
    return SplitConverter(separators, as_converter(type), strip)


class ValidateConverter(Converter):
    def __init__(self, values, inner):
        self.values = values
        self.values_set = set(values)
        self.inner = inner
        self.type = inner.type
        self.flag_value = inner.flag_value

    def parse(self, text):
        value, success = self.inner.parse(text)
        if not (success and (value in self.values_set)):
            return None, False
        return value, True

    def render(self, value):
        return self.inner.render(value)


def validate(*values, type=None):
    """
    Creates a converter that only accepts
    one of a fixed set of values.

        values is the list of permissible values.
        type is the type for the value.  If not specified,
          type defaults to builtins.type(values[0]).
    """
    if not values:
        raise ConfigurationError("validate() called without any values.")
    if type is None:
        type = builtins.type(values[0])
    failed = [value for value in values if not isinstance(value, type)]
    if failed:
        failed = " ".join(repr(x) for x in failed)
        raise ConfigurationError(f"validate() called with these non-homogeneous values {failed}")
    return ValidateConverter(values, as_converter(type))


registry = {}

def register_converter(type, converter):
    """
    Makes converter the converter for options of "type".
    Replaces any existing converter for that type.
    """
    for attr in ("parse", "render", "flag_value"):
        if not hasattr(converter, attr):
            raise ConfigurationError(f"register_converter(): {converter!r} has no {attr!r} attribute")
    registry[type] = converter

def converter_for(type):
    converter = registry.get(type)
    if converter is None:
        raise ConfigurationError(f"no converter registered for {type!r}")
    return converter

def as_converter(o):
    """
    Returns o if it's already a converter,
    otherwise looks o up as a type.
    """
    if isinstance(o, Converter):
        return o
    if hasattr(o, "parse") and hasattr(o, "render") and hasattr(o, "flag_value"):
        return o
    return converter_for(o)


for converter in (
    StrConverter(),
    BoolConverter(),
    IntConverter(),
    FloatConverter(),
    DurationConverter(),
    ):
    register_converter(converter.type, converter)
del converter
