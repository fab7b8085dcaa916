# Core type aliases for the sexpread data model.
#
# Every Lisp value is one of the Term variants defined in sexpread.types:
# Number, Symbol, Cons, Nil or Func. The aliases below are used in annotations
# across the reader, the printer and the builtin layer.

import logging
from typing import Any, Callable, Sequence

from sexpread.config import get_log_level

# Parsed or computed Lisp value
Term = Any

# Primitive procedure body: already-evaluated arguments in, one Term out
BuiltinFn = Callable[[Sequence[Term]], Term]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
try:
    logger.setLevel(get_log_level())
except ValueError as err:
    # A bad level setting must not make the package unimportable
    logger.setLevel(logging.WARNING)
    logger.warning("%s; using WARNING", err)
