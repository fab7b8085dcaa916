from sexpread import Term
from sexpread.errors import SexpTypeError
from sexpread.types.kind import TermKind
from sexpread.types.nil import Nil, NilType
from sexpread.types.symbol import Symbol, T, QUOTE
from sexpread.types.number import Number
from sexpread.types.cons import Cons, list_to_term, term_to_list
from sexpread.types.func import Func

_KINDS = (
    (Number, TermKind.NUMBER),
    (Symbol, TermKind.SYMBOL),
    (Cons, TermKind.CONS),
    (NilType, TermKind.NIL),
    (Func, TermKind.FUNC),
)


def kind_of(term: Term) -> TermKind:
    for cls, kind in _KINDS:
        if isinstance(term, cls):
            return kind
    raise SexpTypeError("term", type(term).__name__)


def bool_term(flag: bool) -> Term:
    return T if flag else Nil


__all__ = [
    "TermKind", "Nil", "NilType", "Symbol", "T", "QUOTE", "Number", "Cons", "Func",
    "list_to_term", "term_to_list", "kind_of", "bool_term",
]
