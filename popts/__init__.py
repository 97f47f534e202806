#!/usr/bin/env python3

"Declarative command-line options for an already-split argument list."
__version__ = "0.1.0"


# please leave this copyright notice in binary distributions.
license = """
popts/__init__.py
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
import datetime
import enum
import io
import itertools
import sys

from . import converters
from . import text

from .converters import Converter, Duration, FunctionConverter, converter_for, register_converter, split, validate
from .exceptions import PoptsBaseException, ConfigurationError, DuplicateNameError, UsageError


##
## Nomenclature
##
##     ./cmd --name argument --flag positio nal
##
##     command:  'cmd'
##     option:   '--name argument' or '--flag'
##     name:     '--name'
##     argument: 'argument'
##     tail:     'positio nal'
##
## The token sequence is stored as a tuple and never changes.
## Everything else refers to tokens by their integer index.
##


class Arity(enum.Enum):
    SINGLE = 1
    MANY = 2

SINGLE = Arity.SINGLE
MANY = Arity.MANY


def normalize_names(names):
    if isinstance(names, str):
        names = (names,)
    names = tuple(names)
    if not names:
        raise ConfigurationError("an option must have at least one name")
    for name in names:
        if not (name and isinstance(name, str)):
            raise ConfigurationError(f"illegal option name {name!r}, names must be non-empty strings")
    if len(set(names)) != len(names):
        raise ConfigurationError(f"option names {names!r} repeat an alias")
    return names


class OptionDefinition:
    """
    One logical option: its names, its arity, whether
    it's a flag, and where it matched in the tokens.

    matches holds token indices one past each matched
    name.  For a value option that's the index of the
    value; if the name was the last token, the index
    equals len(tokens), meaning "no following token".

    parse_errors holds the matches whose value didn't
    convert (or didn't exist).

    values holds the converted values in match order.
    For SINGLE arity the default is always appended
    last, so values[0] is the effective value.
    """

    def __init__(self, names, converter, *, default=None, description='', arity=SINGLE, is_flag=False):
        self.names = names
        self.name_set = frozenset(names)
        self.converter = converter
        self.default = default
        self.description = description
        self.arity = arity
        self.is_flag = is_flag

        self.matches = []
        self.parse_errors = []
        self.values = []

    def __repr__(self):
        flag = " flag" if self.is_flag else ""
        return f"<OptionDefinition {'|'.join(self.names)} {self.arity.name}{flag} matches={self.matches} parse_errors={self.parse_errors}>"

    @property
    def name(self):
        return self.names[0]

    @property
    def default_string(self):
        if self.default is None:
            return ''
        return self.converter.render(self.default)

    def parse_matches(self, tokens):
        self.matches.clear()
        names = self.name_set
        # tokens[0] is the program name
        for position in range(1, len(tokens)):
            if tokens[position] in names:
                self.matches.append(position + 1)
        return len(self.matches)

    def parse_arguments(self, tokens):
        self.parse_matches(tokens)
        self.values.clear()
        self.parse_errors.clear()

        if self.is_flag:
            self.values.extend(itertools.repeat(self.converter.flag_value, len(self.matches)))
        else:
            end = len(tokens)
            parse = self.converter.parse
            for position in self.matches:
                if position < end:
                    value, success = parse(tokens[position])
                    if success:
                        self.values.append(value)
                        continue
                self.parse_errors.append(position)

        if self.arity == SINGLE:
            self.values.append(self.default)

    @property
    def value(self):
        if self.arity == SINGLE:
            return self.values[0]
        return self.values

    def consumed_positions(self, end):
        """
        Yields every token index this option consumed:
        the name of every match, plus the value for
        value options (when there is one).
        """
        for position in self.matches:
            yield position - 1
            if (not self.is_flag) and (position < end):
                yield position

    def last_consumed(self, end):
        if not self.matches:
            return None
        return max(self.consumed_positions(end))


class Options:
    """
    Owns a token sequence and every option registered against it.

    Each registration scans the whole token sequence right away,
    so the typed helpers (string(), flag(), ...) return their
    values immediately.  After registering every option, call
    validate() (or the individual has_*() queries) before
    trusting those values.

    Every query takes an optional "out" argument, a writable
    text stream.  With out, every problem found is written to it;
    without, the query just returns as soon as it knows the answer.
    """

    def __init__(self,
        tokens=None,
        *,

        # if true, registering a name that's already in use
        # raises DuplicateNameError.  either way the option is
        # registered and has_duplicate_names() reports it.
        strict=True,

        # an event log with big.Log's interface:
        # log(message), log.enter(message), log.exit().
        log=None,
        # if true and log is None, creates a big.Log
        # that writes its formatted lines to self.log_lines.
        log_events=False,

        usage_max_columns=80,
        ):
        if tokens is None:
            tokens = sys.argv
        if isinstance(tokens, str):
            raise ConfigurationError("tokens must be a sequence of strings, not a str")
        tokens = tuple(tokens)
        if not tokens:
            raise ConfigurationError("tokens must at least contain the program name")
        for token in tokens:
            if not isinstance(token, str):
                raise ConfigurationError(f"illegal token {token!r}, tokens must be strings")
        self.tokens = tokens

        self.options = []
        self.strict = strict

        self.log_lines = None
        if (log is None) and log_events:
            # a list destination, never print.
            # unthreaded, so lines land as they're logged.
            self.log_lines = []
            log = big.Log(self.log_lines, name='popts', threaded=False)
        self.log = log

        self.usage_max_columns = usage_max_columns
        self.help_option = None

    def __repr__(self):
        return f"<Options {self.program_name!r} tokens={len(self.tokens)} options={len(self.options)}>"

    @property
    def program_name(self):
        fields = list(big.multisplit(self.tokens[0], ("/", "\\")))
        return fields[-1]

    def _quote(self, position):
        if position >= len(self.tokens):
            return "<null>"
        return f"'{self.tokens[position]}'"

    def _quoted_list(self, positions):
        return ", ".join(self._quote(position) for position in positions)

    ##
    ## registration
    ##

    def add_option(self, names, default=None, description='', *, type=None, converter=None, arity=SINGLE, is_flag=False):
        """
        Registers an option and parses it immediately.
        Returns the OptionDefinition.

        The converter is, in order of preference:
            * converter, if specified
            * the registered converter for type, if specified
            * the registered converter for builtins.type(default)
        """
        names = normalize_names(names)
        if not isinstance(arity, Arity):
            raise ConfigurationError(f"illegal arity {arity!r}, must be SINGLE or MANY")

        if converter is not None:
            converter = converters.as_converter(converter)
        else:
            if type is None:
                if default is None:
                    raise ConfigurationError(f"option {names[0]}: can't infer a type from default None, specify type or converter")
                type = builtins.type(default)
            converter = converter_for(type)

        option = OptionDefinition(names, converter,
            default=default,
            description=description,
            arity=arity,
            is_flag=is_flag,
            )

        if self.log is not None:
            self.log.enter(f"register {' '.join(names)}")
        option.parse_arguments(self.tokens)
        self.options.append(option)
        if self.log is not None:
            self.log(f"{len(option.matches)} matches, {len(option.parse_errors)} parse errors")
            self.log.exit()

        in_use = set()
        for o in self.options[:-1]:
            in_use.update(o.names)
        duplicates = [name for name in names if name in in_use]
        if duplicates:
            if self.log is not None:
                self.log(f"duplicate names {' '.join(duplicates)}")
            if self.strict:
                raise DuplicateNameError(duplicates)

        return option

    def make_option(self, names, default, description='', *, type=None, converter=None):
        return self.add_option(names, default, description, type=type, converter=converter).value

    def make_options(self, names, description='', *, type=None, converter=None):
        if (type is None) and (converter is None):
            raise ConfigurationError("make_options() requires type or converter")
        return self.add_option(names, None, description, type=type, converter=converter, arity=MANY).value

    def string(self, names, default, description=''):
        return self.make_option(names, default, description, type=str)

    def strings(self, names, description=''):
        return self.make_options(names, description, type=str)

    def boolean(self, names, default, description=''):
        return self.make_option(names, default, description, type=bool)

    def booleans(self, names, description=''):
        return self.make_options(names, description, type=bool)

    def integer(self, names, default, description=''):
        return self.make_option(names, default, description, type=int)

    def integers(self, names, description=''):
        return self.make_options(names, description, type=int)

    def number(self, names, default, description=''):
        return self.make_option(names, default, description, type=float)

    def numbers(self, names, description=''):
        return self.make_options(names, description, type=float)

    def duration(self, names, default, description=''):
        """
        default may be a number of seconds, a datetime.timedelta,
        or None (no default, like the other typed helpers).
        """
        if isinstance(default, datetime.timedelta):
            default = default.total_seconds()
        if default is not None:
            try:
                default = Duration(default)
            except (TypeError, ValueError):
                raise ConfigurationError(f"option {names!r}: illegal duration default {default!r}, must be a number of seconds or a timedelta") from None
        return self.make_option(names, default, description, type=Duration)

    def durations(self, names, description=''):
        return self.make_options(names, description, type=Duration)

    def flag(self, names, description=''):
        return self.add_option(names, False, description, type=bool, is_flag=True).value

    def flags(self, names, description=''):
        return self.add_option(names, False, description, type=bool, arity=MANY, is_flag=True).value

    def with_help(self, description="Show this help"):
        """
        Registers the "-h" / "--help" flag.
        Returns self, so you can chain it off the constructor.
        """
        self.help_option = self.add_option(("-h", "--help"), False, description, type=bool, is_flag=True)
        return self

    @property
    def help_requested(self):
        return bool(self.help_option and self.help_option.matches)

    ##
    ## queries
    ##

    def has_duplicate_names(self, out=None):
        seen = set()
        reported = set()
        has_duplicates = False

        for option in self.options:
            for name in option.names:
                if name not in seen:
                    seen.add(name)
                    continue
                has_duplicates = True
                if out is None:
                    return True
                if name not in reported:
                    reported.add(name)
                    print(f"Duplicate name: {name}", file=out)

        return has_duplicates

    def has_error_matches(self, out=None):
        end = len(self.tokens)
        has_errors = False
        claimed = []

        for option in self.options:
            if option.parse_errors:
                has_errors = True
                if out is None:
                    return True
                print(f"error matches for option '{option.name}': {self._quoted_list(option.parse_errors)}", file=out)

            if (option.arity == SINGLE) and (len(option.matches) > 1):
                has_errors = True
                if out is None:
                    return True
                message = f"multiple matches for single option '{option.name}'"
                if not option.is_flag:
                    message += ": " + self._quoted_list(option.matches)
                print(message, file=out)

            claimed.extend(option.consumed_positions(end))

        # a position claimed twice was used both as somebody's
        # argument and as a name (or as two arguments).
        claimed.sort()
        for position, claims in itertools.groupby(claimed):
            if len(list(claims)) < 2:
                continue
            has_errors = True
            if out is None:
                return True
            print(f"Name consumed as argument before: {self._quote(position)}", file=out)

        return has_errors

    def has_consistent_tail(self, out=None):
        """
        Returns False if there's an unconsumed token
        sandwiched between two consumed ones.

        Unconsumed tokens after the last consumed token
        are the tail, and are fine.
        """
        end = len(self.tokens)
        consumed = set()
        for option in self.options:
            consumed.update(option.consumed_positions(end))
        consumed = sorted(consumed)

        has_holes = False
        for current, next_consumed in zip(consumed, consumed[1:]):
            expected = current + 1
            if expected == next_consumed:
                continue
            has_holes = True
            if out is None:
                return False
            for position in range(expected, next_consumed):
                print(f"unparsed argument '{self.tokens[position]}' before parsed '{self.tokens[next_consumed]}'", file=out)

        return not has_holes

    def validate(self, out=None):
        """
        Returns True if the command-line parsed cleanly:
        no duplicate names, no error matches, and a
        consistent tail.

        With out, runs (and reports) every check.
        """
        if out is None:
            result = (
                (not self.has_duplicate_names())
                and (not self.has_error_matches())
                and self.has_consistent_tail()
                )
        else:
            duplicates = self.has_duplicate_names(out)
            errors = self.has_error_matches(out)
            consistent = self.has_consistent_tail(out)
            result = (not duplicates) and (not errors) and consistent
        if self.log is not None:
            self.log(f"validate {'passed' if result else 'failed'}")
        return result

    def check(self):
        """
        Raises UsageError describing every problem
        if the command-line didn't parse cleanly.
        """
        out = io.StringIO()
        if not self.validate(out):
            raise UsageError(out.getvalue().rstrip())

    ##
    ## tail
    ##

    @property
    def tail_start(self):
        """
        The index of the first token after the
        last token consumed by any option.
        Never less than 1; tokens[0] is the program name.
        """
        end = len(self.tokens)
        start = 1
        for option in self.options:
            last = option.last_consumed(end)
            if (last is not None) and (last >= start):
                start = last + 1
        return min(start, end)

    def tail(self):
        return list(self.tokens[self.tail_start:])

    ##
    ## description
    ##

    def description(self):
        """
        Returns the usage text: one line per option,
        in registration order.
        """
        rows = []
        for option in self.options:
            names = ", ".join(option.names)
            if option.arity == MANY:
                names += " (...)"
            elif not option.is_flag:
                names += f" [={option.default_string}]"
            rows.append((names, option.description))

        lines = [f"Usage '{self.program_name}' [options]"]
        if rows:
            width = max(len(names) for names, _ in rows) + 4
            margin = max(self.usage_max_columns - width, 20)
            for names, description in rows:
                wrapped = text.wrap_words(text.split_paragraphs(description), margin=margin)
                lines.append(text.merge_columns(names, width, wrapped))
        return "\n".join(lines) + "\n"
