"""
Dekhao teaching language to C++ transpiler.

Dekhao is a tiny line-oriented language used to teach first programs.
It has exactly two statements:

* ``dekhao(arg, ...)`` prints its arguments followed by a newline.
* ``integer|float|string <name> te <expr>`` declares a variable.

Every other line is skipped and reported, never rejected.

The code is organised into several modules:

* ``lang`` – keywords, the tokenizer and the statement parser.
* ``ast`` – dataclasses for print statements, declarations and
  skipped lines.
* ``codegen`` – the C++ emitter and its per-run feature flags.
* ``pipeline`` – helpers that run the whole chain on text or files.
* ``cli`` – the ``dekhao`` command line interface.
"""

from .errors import DekhaoError, EmptyInputError, InputUnavailableError
from .pipeline import TranspileResult, transpile_file, transpile_source

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DekhaoError",
    "EmptyInputError",
    "InputUnavailableError",
    "TranspileResult",
    "transpile_file",
    "transpile_source",
]
