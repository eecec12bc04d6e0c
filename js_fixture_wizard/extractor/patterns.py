"""Signature patterns for JavaScript/TypeScript function discovery.

Each pattern captures the named groups ``name`` and ``params``, plus
``returns`` when the form carries a return annotation. Patterns are tried in
table order and the first capture of a name wins, so earlier categories take
precedence over later ones for the same function.
"""

import re
from dataclasses import dataclass

# Shared fragments
_NAME = r"(?P<name>\w+)"
_PARAMS = r"\((?P<params>[^)]*)\)"
_RETURNS = r"\s*:\s*(?P<returns>[^{]*?)"
_BLOCK = r"\s*\{"
_ARROW_BLOCK = r"\s*=>\s*\{"
_MODIFIER = r"(?:(?:public|private|protected)\s+)?"


@dataclass(frozen=True)
class SignaturePattern:
    """A compiled signature regex tagged with its syntactic category."""

    category: str
    regex: re.Pattern

    @property
    def has_return(self) -> bool:
        return "returns" in self.regex.groupindex


def _compile(category: str, source: str, flags: int = 0) -> SignaturePattern:
    return SignaturePattern(category, re.compile(source, re.ASCII | flags))


PATTERNS: tuple[SignaturePattern, ...] = (
    # function name(a: T): R {
    _compile("declaration", rf"function\s+{_NAME}\s*{_PARAMS}{_RETURNS}{_BLOCK}"),
    _compile("declaration", rf"function\s+{_NAME}\s*{_PARAMS}{_BLOCK}"),
    # const name = (a: T): R => {
    _compile("arrow", rf"const\s+{_NAME}\s*=\s*{_PARAMS}{_RETURNS}{_ARROW_BLOCK}"),
    _compile("arrow", rf"const\s+{_NAME}\s*=\s*{_PARAMS}{_ARROW_BLOCK}"),
    # const name = (a: T): R => expression
    _compile(
        "arrow",
        rf"const\s+{_NAME}\s*=\s*{_PARAMS}\s*:\s*(?P<returns>[^;]+?)\s*=>",
    ),
    _compile("arrow", rf"const\s+{_NAME}\s*=\s*{_PARAMS}\s*=>"),
    # name(a: T): R {
    _compile("method", rf"{_NAME}\s*{_PARAMS}{_RETURNS}{_BLOCK}"),
    _compile("method", rf"{_NAME}\s*{_PARAMS}{_BLOCK}"),
    # async function name(...) / async name(...) => {
    _compile("async", rf"async\s+function\s+{_NAME}\s*{_PARAMS}{_RETURNS}{_BLOCK}"),
    _compile("async", rf"async\s+function\s+{_NAME}\s*{_PARAMS}{_BLOCK}"),
    _compile("async", rf"async\s+{_NAME}\s*{_PARAMS}{_RETURNS}{_ARROW_BLOCK}"),
    _compile("async", rf"async\s+{_NAME}\s*{_PARAMS}{_ARROW_BLOCK}"),
    # [public|private|protected] name(...) { at the start of a line
    _compile(
        "class_method",
        rf"^\s*{_MODIFIER}{_NAME}\s*{_PARAMS}{_RETURNS}{_BLOCK}",
        re.MULTILINE,
    ),
    _compile("class_method", rf"^\s*{_MODIFIER}{_NAME}\s*{_PARAMS}{_BLOCK}", re.MULTILINE),
    # name: function(...) { / name: (...) => {
    _compile(
        "object_method",
        rf"{_NAME}\s*:\s*function\s*{_PARAMS}{_RETURNS}{_BLOCK}",
    ),
    _compile("object_method", rf"{_NAME}\s*:\s*function\s*{_PARAMS}{_BLOCK}"),
    _compile("object_method", rf"{_NAME}\s*:\s*{_PARAMS}{_RETURNS}{_ARROW_BLOCK}"),
    _compile("object_method", rf"{_NAME}\s*:\s*{_PARAMS}{_ARROW_BLOCK}"),
    # export function name(...) / export const name = (...) => {
    _compile("export", rf"export\s+function\s+{_NAME}\s*{_PARAMS}{_RETURNS}{_BLOCK}"),
    _compile("export", rf"export\s+function\s+{_NAME}\s*{_PARAMS}{_BLOCK}"),
    _compile(
        "export",
        rf"export\s+const\s+{_NAME}\s*=\s*{_PARAMS}{_RETURNS}{_ARROW_BLOCK}",
    ),
    _compile("export", rf"export\s+const\s+{_NAME}\s*=\s*{_PARAMS}{_ARROW_BLOCK}"),
)
