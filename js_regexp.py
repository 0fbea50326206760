"""
JavaScript RegExp semantics on top of the ``regex`` module.

Patterns are translated with :func:`js_to_py_regex.translate`, compiled once
per (source, flags) pair and driven the way ``RegExp.prototype.exec`` and the
``String.prototype`` match/search/replace/replaceAll methods drive them.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, Dict, Iterator, List, Optional, Union

import regex

from js_to_py_regex import translate

logger = logging.getLogger(__name__)

# Canonical order of RegExp.prototype.flags
SUPPORTED_FLAGS = "dgimsuvy"

FLAG_MAP = {
    'i': regex.IGNORECASE,
    'm': regex.MULTILINE,
    's': regex.DOTALL,
}

NEVER_MATCHES = "(?!)"


class RegExpError(ValueError):
    """Raised for flags a JavaScript RegExp would reject."""


class StickyNotSupportedError(RegExpError):
    """The sticky flag has no equivalent here."""

    def __init__(self, source: str):
        super().__init__(f"RegExp sticky flag is not supported (/{source}/y)")


def to_python_flags(flags: str) -> int:
    """Validate JavaScript flags and map them onto ``regex`` flags."""
    py_flags = 0
    for flag in flags:
        if flag not in SUPPORTED_FLAGS:
            raise RegExpError(f"Invalid regular expression flag {flag!r}")
        py_flags |= FLAG_MAP.get(flag, 0)
    if len(set(flags)) != len(flags):
        raise RegExpError(f"Duplicate regular expression flags in {flags!r}")
    return py_flags


@lru_cache(maxsize=512)
def _compile(source: str, flags: str) -> regex.Pattern:
    py_flags = to_python_flags(flags)
    if 'y' in flags:
        raise StickyNotSupportedError(source)

    translated = translate(source, flags)
    logger.debug("Compiling /%s/%s as %r", source, flags, translated)
    try:
        return regex.compile(translated, py_flags)
    except regex.error as e:
        logger.warning("Compiling /%s/%s as %r failed (%s); using a pattern that never matches",
                       source, flags, translated, e)
        return regex.compile(NEVER_MATCHES)


def compile_js(source: str, flags: str = "") -> regex.Pattern:
    """Compile JavaScript RegExp source and flags; results are cached."""
    return _compile(source, flags)


class MatchArray(list):
    """
    Result of a successful exec: the whole match followed by every group,
    with None for groups that did not participate.
    """

    def __init__(self, items, index: int, input: str, groups: Optional[Dict[str, Optional[str]]] = None):
        super().__init__(items)
        self.index = index
        self.input = input
        self.groups = groups

    def __repr__(self):
        return f"MatchArray({list.__repr__(self)}, index={self.index})"


def _match_array(match, string: str) -> MatchArray:
    items = [match.group(0)] + list(match.groups())
    groups = match.groupdict() if match.re.groupindex else None
    return MatchArray(items, match.start(), string, groups)


# Legacy RegExp.$1 to RegExp.$9
PAREN_COUNT = 9


@dataclass
class RegExpStatics:
    """
    The legacy static RegExp properties: $1-$9, input, lastMatch, lastParen,
    leftContext and rightContext.

    Pass one to exec, match, match_all, search, replace or replace_all and it
    is updated after every successful match; a failed match leaves it as it
    was. Groups that did not participate read as ''.
    """
    input: str = ""
    last_match: str = ""
    last_paren: str = ""
    left_context: str = ""
    right_context: str = ""
    parens: List[str] = field(default_factory=lambda: [""] * PAREN_COUNT)

    def update(self, result: MatchArray):
        captures = [capture or "" for capture in result[1:]]
        end = result.index + len(result[0])
        self.input = result.input
        self.last_match = result[0]
        self.last_paren = captures[-1] if captures else ""
        self.left_context = result.input[:result.index]
        self.right_context = result.input[end:]
        self.parens = (captures + [""] * PAREN_COUNT)[:PAREN_COUNT]

    def group(self, number: int) -> str:
        """RegExp.$1 through RegExp.$9."""
        if not 1 <= number <= PAREN_COUNT:
            raise IndexError(f"RegExp.${number} does not exist")
        return self.parens[number - 1]


@dataclass
class JSRegExp:
    """A JavaScript regular expression: source, flags and lastIndex."""
    source: str
    flags: str = ""
    last_index: int = 0
    pattern: regex.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.pattern = compile_js(self.source, self.flags)
        self.flags = "".join(f for f in SUPPORTED_FLAGS if f in self.flags)

    def __str__(self):
        return f"/{self.source or '(?:)'}/{self.flags}"

    @property
    def global_(self) -> bool:
        return 'g' in self.flags

    @property
    def ignore_case(self) -> bool:
        return 'i' in self.flags

    @property
    def multiline(self) -> bool:
        return 'm' in self.flags

    @property
    def dot_all(self) -> bool:
        return 's' in self.flags

    @property
    def unicode(self) -> bool:
        return 'u' in self.flags

    @property
    def sticky(self) -> bool:
        return 'y' in self.flags

    @property
    def has_indices(self) -> bool:
        return 'd' in self.flags

    def exec(self, string: str, statics: Optional[RegExpStatics] = None) -> Optional[MatchArray]:
        """RegExp.prototype.exec: global expressions resume at last_index."""
        start = self.last_index if self.global_ else 0
        if start > len(string):
            self.last_index = 0
            return None

        match = self.pattern.search(string, start)
        if match is None:
            if self.global_:
                self.last_index = 0
            return None

        if self.global_:
            self.last_index = match.end()
        result = _match_array(match, string)
        if statics is not None:
            statics.update(result)
        return result

    def test(self, string: str, statics: Optional[RegExpStatics] = None) -> bool:
        return self.exec(string, statics) is not None


Pattern = Union[str, JSRegExp]
Replacement = Union[str, Callable[..., object]]


def _as_regexp(pattern: Pattern) -> JSRegExp:
    if isinstance(pattern, JSRegExp):
        return pattern
    return JSRegExp(pattern)


def _exec_all(rx: JSRegExp, string: str,
              statics: Optional[RegExpStatics] = None) -> Iterator[MatchArray]:
    """Every match of a global RegExp, advancing past empty matches."""
    rx.last_index = 0
    while True:
        result = rx.exec(string, statics)
        if result is None:
            return
        if result[0] == "":
            rx.last_index += 1
        yield result


# =============================================================================
# String.prototype methods
# =============================================================================

def match(string: str, pattern: Pattern,
          statics: Optional[RegExpStatics] = None) -> Union[MatchArray, List[str], None]:
    """String.prototype.match: the first match, or every matched string when global."""
    rx = _as_regexp(pattern)
    if not rx.global_:
        return rx.exec(string, statics)

    found = [result[0] for result in _exec_all(rx, string, statics)]
    return found or None


def match_all(string: str, pattern: Pattern,
              statics: Optional[RegExpStatics] = None) -> Iterator[MatchArray]:
    """String.prototype.matchAll over a global RegExp (a string is made global)."""
    if isinstance(pattern, JSRegExp):
        if not pattern.global_:
            raise TypeError("matchAll must be called with a global RegExp")
        rx = JSRegExp(pattern.source, pattern.flags)
    else:
        rx = JSRegExp(pattern, "g")
    return _exec_all(rx, string, statics)


def search(string: str, pattern: Pattern, statics: Optional[RegExpStatics] = None) -> int:
    """String.prototype.search: index of the first match or -1."""
    rx = _as_regexp(pattern)
    found = rx.pattern.search(string)
    if found is None:
        return -1
    if statics is not None:
        statics.update(_match_array(found, string))
    return found.start()


def expand_replacement(replacement: str, string: str, position: int, matched: str,
                       captures: List[Optional[str]],
                       named_groups: Optional[Dict[str, Optional[str]]] = None) -> str:
    """
    Expand '$' patterns in a replacement string (GetSubstitution).

    $$ is a dollar sign, $& the match, $` the text before it and $' the text
    after it. $n and $nn name a capture: two digits are used only when that
    group exists, otherwise one digit when it exists, otherwise the '$' is
    literal. $<name> names a capture when the pattern has named groups.
    Captures that did not participate expand to the empty string.
    """
    result = []
    group_count = len(captures)
    length = len(replacement)
    i = 0

    while i < length:
        ch = replacement[i]
        if ch != '$' or i + 1 >= length:
            result.append(ch)
            i += 1
            continue

        nxt = replacement[i + 1]
        if nxt == '$':
            result.append('$')
            i += 2
        elif nxt == '&':
            result.append(matched)
            i += 2
        elif nxt == '`':
            result.append(string[:position])
            i += 2
        elif nxt == "'":
            result.append(string[min(position + len(matched), len(string)):])
            i += 2
        elif nxt in "0123456789":
            two = replacement[i + 1:i + 3]
            if len(two) == 2 and two[1] in "0123456789" and 1 <= int(two) <= group_count:
                result.append(captures[int(two) - 1] or "")
                i += 3
            elif 1 <= int(nxt) <= group_count:
                result.append(captures[int(nxt) - 1] or "")
                i += 2
            else:
                result.append('$')
                i += 1
        elif nxt == '<' and named_groups is not None:
            close = replacement.find('>', i + 2)
            if close == -1:
                result.append('$')
                i += 1
            else:
                result.append(named_groups.get(replacement[i + 2:close]) or "")
                i = close + 1
        else:
            result.append('$')
            i += 1

    return "".join(result)


def _substitute(replacement: Replacement, string: str, position: int, matched: str,
                captures: List[Optional[str]],
                named_groups: Optional[Dict[str, Optional[str]]]) -> str:
    if callable(replacement):
        args = [matched, *captures, position, string]
        if named_groups is not None:
            args.append(named_groups)
        return str(replacement(*args))
    if '$' not in replacement:
        return replacement
    return expand_replacement(replacement, string, position, matched, captures, named_groups)


def _string_positions(string: str, search_string: str, replace_all: bool) -> List[int]:
    """Where a plain search string occurs; an empty one occurs everywhere."""
    positions = []
    step = max(len(search_string), 1)
    position = string.find(search_string)
    while position != -1:
        positions.append(position)
        if not replace_all:
            break
        position = string.find(search_string, position + step)
    return positions


def _replace_string(string: str, search_string: str, replacement: Replacement,
                    replace_all: bool) -> str:
    parts = []
    previous = 0
    for position in _string_positions(string, search_string, replace_all):
        parts.append(string[previous:position])
        parts.append(_substitute(replacement, string, position, search_string, [], None))
        previous = position + len(search_string)
    parts.append(string[previous:])
    return "".join(parts)


def _replace_regexp(string: str, rx: JSRegExp, replacement: Replacement,
                    statics: Optional[RegExpStatics] = None) -> str:
    if rx.global_:
        results = list(_exec_all(rx, string, statics))
    else:
        first = rx.exec(string, statics)
        results = [first] if first is not None else []

    parts = []
    previous = 0
    for result in results:
        parts.append(string[previous:result.index])
        parts.append(_substitute(replacement, string, result.index, result[0],
                                 result[1:], result.groups))
        previous = result.index + len(result[0])
    parts.append(string[previous:])
    return "".join(parts)


def replace(string: str, pattern: Pattern, replacement: Replacement,
            statics: Optional[RegExpStatics] = None) -> str:
    """String.prototype.replace; a string pattern is searched literally."""
    if isinstance(pattern, str):
        return _replace_string(string, pattern, replacement, replace_all=False)
    return _replace_regexp(string, pattern, replacement, statics)


def replace_all(string: str, pattern: Pattern, replacement: Replacement,
                statics: Optional[RegExpStatics] = None) -> str:
    """String.prototype.replaceAll; a RegExp pattern must be global."""
    if isinstance(pattern, str):
        return _replace_string(string, pattern, replacement, replace_all=True)
    if not pattern.global_:
        raise TypeError("replaceAll must be called with a global RegExp")
    return _replace_regexp(string, pattern, replacement, statics)
