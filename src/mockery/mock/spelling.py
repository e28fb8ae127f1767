"""Rebuild type spellings exactly as written in the source.

The front end's canonical type names lose the author's spelling (``int
const&`` becomes ``const int &``), so types are rebuilt from tokens instead:
comments are dropped, and a single space separates two tokens only when the
source had whitespace between them.
"""

from __future__ import annotations

from collections.abc import Sequence

from mockery.ast.entity import Entity, Token, TokenKind
from mockery.config.constants import DECL_SPECIFIERS, VIRT_SPECIFIERS

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())
_TRAILING_RETURN_END = VIRT_SPECIFIERS | {"=", ";", "{", "requires"}
_ATTRIBUTE_KEYWORDS = frozenset({"__attribute__", "__declspec", "alignas"})


def _without_comments(tokens: Sequence[Token]) -> list[Token]:
    return [t for t in tokens if t.kind is not TokenKind.COMMENT]


def reconstruct_spelling(tokens: Sequence[Token], stop_at: str | None = None) -> str:
    """Join ``tokens`` with the source's spacing, up to the first ``stop_at`` token.

    Each token is followed by one space if it does not abut its successor in
    the source; the last token pairs with the first, and trailing whitespace
    is trimmed.
    """
    kept = _without_comments(tokens)
    if stop_at is not None:
        for i, token in enumerate(kept):
            if token.spelling == stop_at:
                kept = kept[:i]
                break

    parts: list[str] = []
    for left, right in zip(kept, kept[1:] + kept[:1], strict=True):
        parts.append(left.spelling)
        if left.end != right.start:
            parts.append(" ")
    return "".join(parts).rstrip()


def _top_level_index(tokens: Sequence[Token], spelling: str, start: int = 0) -> int | None:
    depth = 0
    for i in range(start, len(tokens)):
        text = tokens[i].spelling
        if depth == 0 and text == spelling:
            return i
        if text in _OPENERS:
            depth += 1
        elif text in _CLOSERS:
            depth -= 1
    return None


def _matching_close(tokens: Sequence[Token], open_index: int) -> int | None:
    depth = 0
    for i in range(open_index, len(tokens)):
        text = tokens[i].spelling
        if text in _OPENERS:
            depth += 1
        elif text in _CLOSERS:
            depth -= 1
            if depth == 0:
                return i
    return None


def _name_index(tokens: Sequence[Token], name: str) -> int | None:
    for i, token in enumerate(tokens):
        if token.spelling == name:
            return i
    return None


def parameter_type_spelling(parameter: Entity) -> str:
    """Declared type of a parameter, without its name or default argument.

    A declarator that goes on past the name (``void (*cb)(int)``,
    ``int values[3]``) has no contiguous type text; the front end's type
    spelling is used for it, which also carries the array-to-pointer
    adjustment.
    """
    tokens = _without_comments(parameter.tokens())
    if parameter.name:
        name = _name_index(tokens, parameter.name)
        if name is None:
            spelling = reconstruct_spelling(tokens)
        elif name + 1 < len(tokens) and tokens[name + 1].spelling != "=":
            return parameter.type_spelling or reconstruct_spelling(tokens[:name])
        else:
            spelling = reconstruct_spelling(tokens[:name])
    else:
        default = _top_level_index(tokens, "=")
        spelling = reconstruct_spelling(tokens[:default] if default is not None else tokens)
    return spelling or parameter.type_spelling or ""


def _locate_name(tokens: Sequence[Token], name: str) -> tuple[int, int] | None:
    """(first name token, parameter list '(') of a function declarator."""
    target = name.replace(" ", "")
    for i, token in enumerate(tokens):
        if not target.startswith(token.spelling):
            continue
        j, joined = i, ""
        while j < len(tokens) and len(joined) < len(target):
            joined += tokens[j].spelling
            j += 1
        if joined == target and j < len(tokens) and tokens[j].spelling == "(":
            return i, j
    return None


def _strip_specifiers(tokens: Sequence[Token]) -> list[Token]:
    """Drop declaration specifiers and attributes ahead of a return type."""
    kept: list[Token] = []
    i = 0
    while i < len(tokens):
        text = tokens[i].spelling
        if text == "[" and i + 1 < len(tokens) and tokens[i + 1].spelling == "[":
            close = _matching_close(tokens, i)
            i = len(tokens) if close is None else close + 1
        elif text in _ATTRIBUTE_KEYWORDS and i + 1 < len(tokens) and tokens[i + 1].spelling == "(":
            close = _matching_close(tokens, i + 1)
            i = len(tokens) if close is None else close + 1
        elif text in DECL_SPECIFIERS:
            i += 1
        else:
            kept.append(tokens[i])
            i += 1
    return kept


def _trailing_return_tokens(tokens: Sequence[Token], params_open: int) -> list[Token] | None:
    params_close = _matching_close(tokens, params_open)
    if params_close is None:
        return None
    arrow = _top_level_index(tokens, "->", params_close + 1)
    if arrow is None:
        return None
    end = len(tokens)
    for terminator in _TRAILING_RETURN_END:
        index = _top_level_index(tokens, terminator, arrow + 1)
        if index is not None:
            end = min(end, index)
    return list(tokens[arrow + 1 : end])


def result_type_spelling(method: Entity) -> str:
    """Declared return type of a method, leading or trailing (``auto f() -> T``)."""
    fallback = method.result_type_spelling or ""
    tokens = _without_comments(method.tokens())
    located = _locate_name(tokens, method.name or "") if method.name else None
    if located is None:
        return fallback

    name_index, params_open = located
    leading = _strip_specifiers(tokens[:name_index])
    chosen = leading
    if [t.spelling for t in leading] == ["auto"]:
        trailing = _trailing_return_tokens(tokens, params_open)
        if trailing:
            chosen = trailing
    return reconstruct_spelling(chosen) or fallback
