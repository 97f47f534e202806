# please leave this copyright notice in binary distributions.
license = """
popts/exceptions.py
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


class PoptsBaseException(Exception):
    pass

class ConfigurationError(PoptsBaseException):
    """
    Raised when the Popts API is used improperly.
    """
    pass

class DuplicateNameError(ConfigurationError):
    """
    Raised when an option is registered with a name
    that another option already uses.

    The offending option is still registered, so
    Options.has_duplicate_names() reports it too.
    """
    def __init__(self, names):
        self.names = tuple(names)
        super().__init__("duplicate option names: " + ", ".join(self.names))


class UsageError(PoptsBaseException):
    """
    Raised by Options.check() when the command-line
    doesn't parse cleanly.
    """
    pass
