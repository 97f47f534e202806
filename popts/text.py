# please leave this copyright notice in binary distributions.
license = """
popts/text.py
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


def wrap_words(words, margin=79, *, two_spaces=True):
    """
    Joins "words" into lines no longer than "margin"
    and returns the result as a single string.

    "words" should be an iterable of pre-split words.
    An empty string in "words" forces a line break.

    If "two_spaces" is true, words that end in sentence-ending
    punctuation ('.', '?', and '!') are followed by two spaces.

    A word longer than "margin" gets a line to itself;
    words are never broken.
    """
    col = 0
    lastword = ''
    text = []

    for word in words:
        length = len(word)

        if not length:
            lastword = word
            col = 0
            text.append('\n')
            continue

        if two_spaces and lastword.endswith(('.', '?', '!')):
            space = "  "
        else:
            space = " "

        if col and ((col + len(space) + length) > margin):
            text.append('\n')
            col = 0
        elif col:
            text.append(space)
            col += len(space)

        text.append(word)
        col += length
        lastword = word

    return "".join(text)


def split_paragraphs(s):
    """
    Splits s into words for wrap_words().

    Blank lines separate paragraphs; a paragraph break
    is preserved as a pair of empty strings.
    """
    words = []
    paragraph_break = False
    for line in s.split('\n'):
        fields = line.split()
        if not fields:
            paragraph_break = bool(words)
            continue
        if paragraph_break:
            words.extend(('', ''))
            paragraph_break = False
        words.extend(fields)
    return words


def merge_columns(left, width, right):
    """
    Lays out one row of a two-column table.

    "left" is padded to "width" characters and
    "right" follows it.  Any further lines in "right"
    are indented by "width" spaces, so they line up
    under the first one.

    If "left" doesn't fit in "width", it's printed
    on a line by itself and "right" starts below it:

        merge_columns("--a-very-long-option", 8, "hello")

    returns

        --a-very-long-option
                hello

    Output lines are rstripped.  This function doesn't
    wrap text; use wrap_words() on "right" first.
    """
    right_lines = right.split('\n')
    if len(left) < width:
        first = left.ljust(width) + right_lines.pop(0)
    else:
        first = left
    indent = " " * width
    lines = [first.rstrip()]
    lines.extend((indent + line).rstrip() for line in right_lines)
    return "\n".join(lines).rstrip()
