#!/usr/bin/env python3
"""
JavaScript RegExp to Python regex Translator

Rewrites the source of an ECMAScript regular expression into a pattern for
the third-party ``regex`` module that matches the same strings. The rewrite
is a single left-to-right scan; it never raises, every malformed construct
degrades to literal text.
"""

import argparse
import string
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import regex

# =============================================================================
# Token Types
# =============================================================================

class TokenKind(Enum):
    """Lexeme classes the scanner dispatches on."""
    LITERAL = "literal"
    STANDARD_ESCAPE = "standard_escape"
    BACKREFERENCE_OR_OCTAL = "backreference_or_octal"
    CLASS_OPEN = "class_open"
    QUANTIFIER_OPEN = "quantifier_open"
    GROUP_OPEN = "group_open"
    GROUP_CLOSE = "group_close"


# Lexeme kinds
CHAR = "char"            # a single character, value holds its code point
SET = "set"              # a class escape like \d or \p{L}
DASH = "dash"            # an unescaped '-' inside a class
ASSERTION = "assertion"  # \b, \B
BACKREF = "backref"
DROPPED = "dropped"      # emits nothing
NEGATED_SET = "negated"  # \D, \W or \S inside a class, text holds the ranges it excludes


@dataclass
class Lexeme:
    """One translated piece of pattern text."""
    text: str
    kind: str = CHAR
    value: Optional[int] = None

    def __repr__(self):
        return f"Lexeme({self.text!r}, {self.kind})"


@dataclass
class ScanState:
    """Everything one translate() call mutates."""
    pos: int = 0
    group_count: int = 0
    in_class: bool = False
    class_start: int = -1
    open_groups: List[int] = field(default_factory=list)
    group_names: Dict[str, int] = field(default_factory=dict)
    backreferences: Set[int] = field(default_factory=set)
    optional_groups: Set[int] = field(default_factory=set)


HEX_DIGITS = "0123456789abcdefABCDEF"
OCTAL_DIGITS = "01234567"
DECIMAL_DIGITS = "0123456789"

CLASS_ESCAPES = "dDwWsS"

# JavaScript class escapes are ASCII (except \s); regex's are Unicode on str patterns
DIGIT_RANGES = "0-9"
WORD_RANGES = "A-Za-z0-9_"
SPACE_RANGES = ("\\t\\n\\v\\f\\r \\xa0\\u1680\\u2000-\\u200a\\u2028\\u2029"
                "\\u202f\\u205f\\u3000\\ufeff")
CLASS_ESCAPE_RANGES = {'d': DIGIT_RANGES, 'w': WORD_RANGES, 's': SPACE_RANGES}

WORD_BOUNDARY = ("(?:(?<=[A-Za-z0-9_])(?![A-Za-z0-9_])"
                 "|(?<![A-Za-z0-9_])(?=[A-Za-z0-9_]))")
NOT_WORD_BOUNDARY = ("(?:(?<=[A-Za-z0-9_])(?=[A-Za-z0-9_])"
                     "|(?<![A-Za-z0-9_])(?![A-Za-z0-9_]))")

LINE_TERMINATORS = "\\n\\r\\u2028\\u2029"
ANY_BUT_LINE_TERMINATOR = f"[^{LINE_TERMINATORS}]"
LINE_START = f"(?<![^{LINE_TERMINATORS}])"
LINE_END = f"(?![^{LINE_TERMINATORS}])"
INPUT_END = "\\Z"

CONTROL_ESCAPES = {'t': 0x09, 'n': 0x0A, 'v': 0x0B, 'f': 0x0C, 'r': 0x0D}

# regex rejects repeat counts at or above 0xFFFFFFFF
MAX_REPEAT = 0xFFFFFFFE
MAX_CODE_POINT = 0x10FFFF

PROPERTY_KEYS = ("General_Category", "gc", "Script", "sc", "Script_Extensions", "scx")

_BRACE_QUANTIFIER = regex.compile(r"\{([0-9]+)(,([0-9]*))?\}")
_UNICODE_BRACES = regex.compile(r"\{([0-9A-Fa-f]+)\}")
_PROPERTY_BODY = regex.compile(r"\{([A-Za-z0-9_]+(?:=[A-Za-z0-9_]+)?)\}")
_GROUP_NAME = regex.compile(r"<([\w$]+)>")
_NAMED_GROUP_OPEN = regex.compile(r"\(\?<(?![=!])")
_MODIFIERS = regex.compile(r"\?([ims]*)(?:-([ims]*))?:")


@lru_cache(maxsize=None)
def is_known_property(name: str) -> bool:
    """Whether \\p{name} is a property both dialects understand."""
    key, sep, value = name.partition('=')
    if sep and key not in PROPERTY_KEYS:
        return False
    try:
        regex.compile(f"\\p{{{name}}}")
    except regex.error:
        return False
    return True


# =============================================================================
# Single-pass Translator
# =============================================================================

class JSRegexTranslator:
    """
    Forward scanner rewriting JavaScript pattern source for ``regex``.

    Groups are scanned recursively into their own buffer, so a group's text
    is only emitted once its closing parenthesis (and any quantifier after
    it) has been seen. ``wrap_groups`` names capturing groups that are
    quantified with ``?`` and referenced later; their body is wrapped as
    ``((?:body)?)`` so the group always participates and a later
    backreference matches empty, as in JavaScript.

    ``flags`` are the JavaScript flags; ``m`` and ``s`` change how ``^``,
    ``$`` and ``.`` are written.
    """

    def __init__(self, pattern: str, flags: str = "",
                 wrap_groups: FrozenSet[int] = frozenset()):
        self.pattern = pattern
        self.length = len(pattern)
        self.multiline = 'm' in flags
        self.dot_all = 's' in flags
        self.wrap_groups = wrap_groups
        self.has_named_groups = _NAMED_GROUP_OPEN.search(pattern) is not None
        self.state = ScanState()

    def translate(self) -> str:
        text, _closed = self._scan_sequence(nested=False)
        return text

    def _peek(self, offset: int = 0) -> Optional[str]:
        pos = self.state.pos + offset
        if pos < self.length:
            return self.pattern[pos]
        return None

    def _advance(self, count: int = 1):
        self.state.pos += count

    def _classify(self) -> TokenKind:
        ch = self._peek()
        if ch == '\\':
            nxt = self._peek(1)
            if nxt is not None and nxt in "123456789":
                return TokenKind.BACKREFERENCE_OR_OCTAL
            return TokenKind.STANDARD_ESCAPE
        if ch == '[':
            return TokenKind.CLASS_OPEN
        if ch in '*+?{':
            return TokenKind.QUANTIFIER_OPEN
        if ch == '(':
            return TokenKind.GROUP_OPEN
        if ch == ')':
            return TokenKind.GROUP_CLOSE
        return TokenKind.LITERAL

    def _read_digits(self) -> str:
        start = self.state.pos
        while self._peek() is not None and self._peek() in DECIMAL_DIGITS:
            self._advance()
        return self.pattern[start:self.state.pos]

    def _quantifier_follows(self) -> bool:
        ch = self._peek()
        if ch is None:
            return False
        if ch in '*+?':
            return True
        return ch == '{' and self._brace_quantifier() is not None

    # -------------------------------------------------------------------------
    # Sequences
    # -------------------------------------------------------------------------

    def _scan_sequence(self, nested: bool) -> Tuple[str, bool]:
        """Scan up to the ')' closing the current group or the end of input.

        Returns:
            Tuple of (translated text, whether a closing ')' was found)
        """
        parts = []
        quantifiable = False

        while self.state.pos < self.length:
            kind = self._classify()

            if kind is TokenKind.GROUP_CLOSE:
                if nested:
                    return "".join(parts), True
                # Unmatched ')'
                self._advance()
                parts.append('\\)')
                quantifiable = True

            elif kind is TokenKind.LITERAL:
                text, quantifiable = self._translate_literal()
                parts.append(text)

            elif kind is TokenKind.STANDARD_ESCAPE:
                lexeme = self._translate_escape()
                parts.append(lexeme.text)
                quantifiable = lexeme.kind != ASSERTION

            elif kind is TokenKind.BACKREFERENCE_OR_OCTAL:
                parts.append(self._translate_backreference())
                quantifiable = True

            elif kind is TokenKind.CLASS_OPEN:
                parts.append(self._translate_class())
                quantifiable = True

            elif kind is TokenKind.QUANTIFIER_OPEN:
                text, quantifiable = self._translate_quantifier(quantifiable)
                parts.append(text)

            else:
                text, quantifiable = self._translate_group()
                parts.append(text)

        return "".join(parts), False

    def _translate_literal(self) -> Tuple[str, bool]:
        ch = self._peek()
        self._advance()
        if ch == '.':
            return ('(?s:.)' if self.dot_all else ANY_BUT_LINE_TERMINATOR), True
        if ch == '^':
            return (LINE_START if self.multiline else '^'), False
        if ch == '$':
            # regex's bare '$' also matches before a final newline
            return (LINE_END if self.multiline else INPUT_END), False
        if ch == '|':
            return ch, False
        if ch == '}':
            return '\\}', True
        return ch, True

    # -------------------------------------------------------------------------
    # Quantifiers
    # -------------------------------------------------------------------------

    def _brace_quantifier(self) -> Optional[str]:
        """Return the '{n}', '{n,}' or '{n,m}' text at the cursor, if valid."""
        m = _BRACE_QUANTIFIER.match(self.pattern, self.state.pos)
        if m is None:
            return None
        low = int(m.group(1))
        high = int(m.group(3)) if m.group(3) else None
        if low > MAX_REPEAT or (high is not None and (high > MAX_REPEAT or high < low)):
            return None
        return m.group(0)

    def _lazy_suffix(self) -> str:
        if self._peek() == '?':
            self._advance()
            return '?'
        return ""

    def _translate_quantifier(self, quantifiable: bool) -> Tuple[str, bool]:
        """Translate '*', '+', '?' or '{'; a quantifier with nothing to repeat is literal."""
        ch = self._peek()

        if ch == '{':
            body = self._brace_quantifier()
            if body is None or not quantifiable:
                self._advance()
                return '\\{', True
            self._advance(len(body))
            return body + self._lazy_suffix(), False

        self._advance()
        if not quantifiable:
            return '\\' + ch, True
        return ch + self._lazy_suffix(), False

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    def _group_opener(self) -> Tuple[str, Optional[int], bool]:
        """Consume what follows '(' and decide how the group opens.

        Returns:
            Tuple of (opening text, capturing group number or None, is_lookaround)
        """
        if self._peek() != '?':
            self.state.group_count += 1
            return '(', self.state.group_count, False

        if self._peek(1) == ':':
            self._advance(2)
            return '(?:', None, False

        if self._peek(1) in ('=', '!'):
            opener = '(?' + self._peek(1)
            self._advance(2)
            return opener, None, True

        if self._peek(1) == '<' and self._peek(2) in ('=', '!'):
            opener = '(?<' + self._peek(2)
            self._advance(3)
            return opener, None, True

        if self._peek(1) == '<':
            m = _GROUP_NAME.match(self.pattern, self.state.pos + 1)
            if m is not None:
                name = m.group(1)
                self._advance(1 + len(m.group(0)))
                self.state.group_count += 1
                number = self.state.group_count
                if name in self.state.group_names or not name.isidentifier():
                    self.state.group_names.setdefault(name, number)
                    return '(', number, False
                self.state.group_names[name] = number
                return f'(?<{name}>', number, False

        m = _MODIFIERS.match(self.pattern, self.state.pos)
        if m is not None and self._valid_modifiers(m.group(1), m.group(2)):
            self._advance(len(m.group(0)))
            return '(' + m.group(0), None, False

        # Unknown extension: keep the grouping, the '?' becomes literal
        self._advance()
        return '(?:\\?', None, False

    def _valid_modifiers(self, on: str, off: Optional[str]) -> bool:
        if off is None:
            return bool(on) and len(set(on)) == len(on)
        if not off:
            return False
        letters = on + off
        return len(set(letters)) == len(letters)

    def _translate_group(self) -> Tuple[str, bool]:
        """Translate a parenthesized group, recursing into its body."""
        self._advance()  # consume '('
        opener, number, lookaround = self._group_opener()

        if number is not None:
            self.state.open_groups.append(number)
        body, closed = self._scan_sequence(nested=True)
        if number is not None:
            self.state.open_groups.pop()

        if not closed:
            # Unterminated group: close it at end of input
            return f"{opener}{body})", True

        self._advance()  # consume ')'

        if number is not None and self._peek() == '?':
            self.state.optional_groups.add(number)
            if number in self.wrap_groups:
                self._advance()
                quantifier = '?' + self._lazy_suffix()
                return f"{opener}(?:{body}){quantifier})", False

        text = f"{opener}{body})"
        if lookaround and self._quantifier_follows():
            return f"(?:{text})", True
        return text, True

    # -------------------------------------------------------------------------
    # Backreferences
    # -------------------------------------------------------------------------

    def _reference(self, number: int, suffix: str = "") -> str:
        """Emit a reference to a group, or an empty match if it is still open."""
        if number in self.state.open_groups:
            return '(?:)' + suffix
        self.state.backreferences.add(number)
        if suffix or number > 99:
            return f'\\g<{number}>' + suffix
        return f'\\{number}'

    def _split_reference(self, digits: str) -> Tuple[int, str]:
        """Longest leading group number that exists, plus the literal rest."""
        ref = digits
        while int(ref) > self.state.group_count:
            ref = ref[:-1]
        return int(ref), digits[len(ref):]

    def _translate_backreference(self) -> str:
        """Translate '\\N' outside a class: a backreference or an octal escape."""
        self._advance()  # consume '\'
        digits = self._read_digits()
        first = digits[0]

        if int(first) > self.state.group_count:
            # No such group yet: octal escape, remaining digits are literal
            rest = digits[1:]
            if first in OCTAL_DIGITS and rest[:1] and rest[0] in OCTAL_DIGITS:
                return '\\00' + first + rest
            return '\\0' + first + rest

        number, rest = self._split_reference(digits)
        return self._reference(number, rest)

    def _translate_named_reference(self) -> Optional[Lexeme]:
        """Translate '\\k<name>' (cursor on 'k') when the pattern has named groups."""
        if not self.has_named_groups:
            return None
        m = _GROUP_NAME.match(self.pattern, self.state.pos + 1)
        if m is None:
            return None
        self._advance(1 + len(m.group(0)))
        name = m.group(1)
        number = self.state.group_names.get(name)
        if number is None or number in self.state.open_groups:
            return Lexeme('(?:)', BACKREF)
        self.state.backreferences.add(number)
        if name.isidentifier():
            return Lexeme(f'(?P={name})', BACKREF)
        return Lexeme(f'\\g<{number}>', BACKREF)

    # -------------------------------------------------------------------------
    # Escapes
    # -------------------------------------------------------------------------

    def _legacy_octal(self) -> Lexeme:
        """Read a JS legacy octal escape (cursor on its first digit)."""
        start = self.state.pos
        limit = 3 if self._peek() in "0123" else 2
        while (self.state.pos - start < limit and self._peek() is not None
               and self._peek() in OCTAL_DIGITS):
            self._advance()
        digits = self.pattern[start:self.state.pos]
        nxt = self._peek()
        if nxt is not None and nxt in DECIMAL_DIGITS:
            text = '\\' + digits.zfill(3)
        else:
            text = '\\' + digits
        return Lexeme(text, CHAR, int(digits, 8))

    def _hex_run(self, offset: int, count: int) -> Optional[str]:
        start = self.state.pos + offset
        digits = self.pattern[start:start + count]
        if len(digits) == count and all(c in HEX_DIGITS for c in digits):
            return digits
        return None

    def _translate_unicode_escape(self) -> Lexeme:
        """Translate what follows '\\u' (cursor on 'u')."""
        digits = self._hex_run(1, 4)
        if digits is not None:
            self._advance(5)
            return Lexeme('\\u' + digits, CHAR, int(digits, 16))

        m = _UNICODE_BRACES.match(self.pattern, self.state.pos + 1)
        if m is not None and int(m.group(1), 16) <= MAX_CODE_POINT:
            self._advance(1 + len(m.group(0)))
            value = int(m.group(1), 16)
            return Lexeme(f'\\U{value:08X}', CHAR, value)

        # Identity escape; a following '{' is left to the brace rule
        self._advance()
        return Lexeme('u', CHAR, ord('u'))

    def _translate_control_escape(self) -> Lexeme:
        """Translate what follows '\\c' (cursor on 'c')."""
        letter = self._peek(1)
        allowed = string.ascii_letters
        if self.state.in_class:
            allowed += DECIMAL_DIGITS + '_'
        if letter is not None and letter in allowed:
            self._advance(2)
            value = ord(letter) % 32
            return Lexeme(f'\\x{value:02x}', CHAR, value)
        # A lone backslash; 'c' is scanned again as a literal
        return Lexeme('\\\\', CHAR, ord('\\'))

    def _translate_property_escape(self) -> Lexeme:
        """Translate what follows '\\p' or '\\P' (cursor on the letter)."""
        letter = self._peek()
        m = _PROPERTY_BODY.match(self.pattern, self.state.pos + 1)
        if m is not None and is_known_property(m.group(1)):
            self._advance(1 + len(m.group(0)))
            return Lexeme(f'\\{letter}{{{m.group(1)}}}', SET)
        self._advance()
        return Lexeme(letter, CHAR, ord(letter))

    def _translate_escape(self) -> Lexeme:
        """Translate a backslash escape other than '\\1'-'\\9' outside a class."""
        in_class = self.state.in_class
        self._advance()  # consume '\'
        ch = self._peek()

        if ch is None:
            return Lexeme('\\\\', CHAR, ord('\\'))

        if ch in CLASS_ESCAPES:
            self._advance()
            ranges = CLASS_ESCAPE_RANGES[ch.lower()]
            if ch.islower():
                return Lexeme(ranges if in_class else f'[{ranges}]', SET)
            if in_class:
                return Lexeme(ranges, NEGATED_SET)
            return Lexeme(f'[^{ranges}]', SET)

        if ch in CONTROL_ESCAPES:
            self._advance()
            return Lexeme('\\' + ch, CHAR, CONTROL_ESCAPES[ch])

        if ch == 'b':
            self._advance()
            if in_class:
                return Lexeme('\\x08', CHAR, 0x08)
            return Lexeme(WORD_BOUNDARY, ASSERTION)

        if ch == 'B':
            self._advance()
            if in_class:
                return Lexeme('B', CHAR, ord('B'))
            return Lexeme(NOT_WORD_BOUNDARY, ASSERTION)

        if ch == '0':
            if in_class:
                return self._legacy_octal()
            self._advance()
            return Lexeme('\\0', CHAR, 0)

        if ch == 'x':
            digits = self._hex_run(1, 2)
            if digits is not None:
                self._advance(3)
                return Lexeme('\\x' + digits, CHAR, int(digits, 16))
            self._advance()
            return Lexeme('x', CHAR, ord('x'))

        if ch == 'u':
            return self._translate_unicode_escape()

        if ch == 'c':
            return self._translate_control_escape()

        if ch in 'pP':
            return self._translate_property_escape()

        if ch == 'k' and not in_class:
            lexeme = self._translate_named_reference()
            if lexeme is not None:
                return lexeme

        self._advance()
        if ch.isascii() and ch.isalnum():
            # No meaning in JavaScript, drop the backslash
            return Lexeme(ch, CHAR, ord(ch))
        if ch.isascii():
            return Lexeme('\\' + ch, CHAR, ord(ch))
        return Lexeme(ch, CHAR, ord(ch))

    # -------------------------------------------------------------------------
    # Character classes
    # -------------------------------------------------------------------------

    def _find_class_end(self) -> Optional[int]:
        """Position of the ']' closing the class opened at the cursor."""
        pos = self.state.pos + 1
        if pos < self.length and self.pattern[pos] == '^':
            pos += 1
        while pos < self.length:
            ch = self.pattern[pos]
            if ch == '\\':
                pos += 2
                continue
            if ch == ']':
                return pos
            pos += 1
        return None

    def _class_atom(self) -> Lexeme:
        """Translate one member of a class body."""
        ch = self._peek()

        if ch == '\\':
            nxt = self._peek(1)
            if nxt is not None and nxt in "123456789":
                return self._class_backreference()
            return self._translate_escape()

        self._advance()
        if ch == '[':
            return Lexeme('\\[', CHAR, ord('['))
        if ch == '-':
            return Lexeme('-', DASH, ord('-'))
        return Lexeme(ch, CHAR, ord(ch))

    def _class_backreference(self) -> Lexeme:
        """'\\N' inside a class: a backreference is dropped, otherwise it is octal."""
        self._advance()  # consume '\'
        first = self._peek()

        if int(first) <= self.state.group_count:
            digits = self._read_digits()
            _number, rest = self._split_reference(digits)
            # Only the reference is dropped; trailing digits are members
            self.state.pos -= len(rest)
            return Lexeme("", DROPPED)

        if first in "89":
            self._advance()
            return Lexeme(first, CHAR, ord(first))
        return self._legacy_octal()

    def _render_class(self, members: List[Lexeme]) -> str:
        """Join class members, escaping '-' wherever it cannot form a range."""
        out = []
        count = len(members)
        i = 0
        while i < count:
            left = members[i]
            if i + 2 < count and members[i + 1].kind == DASH:
                right = members[i + 2]
                if (left.value is not None and right.value is not None
                        and left.value <= right.value):
                    out.append(self._range_end(left) + '-' + self._range_end(right))
                else:
                    out.append(self._range_end(left) + '\\-' + self._range_end(right))
                i += 3
                continue
            if left.kind == DASH and 0 < i < count - 1:
                out.append('\\-')
            elif left.kind != NEGATED_SET:
                out.append(left.text)
            i += 1
        return "".join(out)

    def _range_end(self, lexeme: Lexeme) -> str:
        if lexeme.kind == DASH:
            return '\\-'
        if lexeme.kind == NEGATED_SET:
            return ""
        return lexeme.text

    def _bracket(self, body: str, negated: bool = False) -> str:
        if not negated and body.startswith('^'):
            body = '\\' + body
        return '[' + ('^' if negated else '') + body + ']'

    def _complement_class(self, body: str, negated: bool, complements: List[str]) -> str:
        """Write a class holding \\D, \\W or \\S without complement ranges.

        Complement ranges would contain case variants of ASCII letters
        (U+212A folds to 'k'), so each negated escape stays a negated set.
        """
        if not negated:
            alternatives = [self._bracket(body)] if body else []
            alternatives += [self._bracket(ranges, negated=True) for ranges in complements]
            if len(alternatives) == 1:
                return alternatives[0]
            return '(?:' + '|'.join(alternatives) + ')'

        # Inside every excluded range and outside the listed members
        text = "".join(f'(?={self._bracket(ranges)})' for ranges in complements[:-1])
        text += self._bracket(complements[-1])
        if body:
            text = f'(?!{self._bracket(body)})' + text
        if len(complements) == 1 and not body:
            return text
        return f'(?:{text})'

    def _translate_class(self) -> str:
        """Translate '[...]', including the empty and unterminated forms."""
        end = self._find_class_end()
        if end is None:
            # Unterminated: the '[' (and a following '^') are literal
            self._advance()
            if self._peek() == '^':
                self._advance()
                return '\\[\\^'
            return '\\['

        self.state.in_class = True
        self.state.class_start = self.state.pos
        self._advance()  # consume '['
        negated = self._peek() == '^'
        if negated:
            self._advance()

        atoms = []
        while self.state.pos < end:
            atoms.append(self._class_atom())
        self._advance()  # consume ']'
        self.state.in_class = False

        members = [atom for atom in atoms if atom.kind != DROPPED]
        complements = [atom.text for atom in members if atom.kind == NEGATED_SET]
        body = self._render_class(members)
        if complements:
            return self._complement_class(body, negated, complements)
        if body:
            return self._bracket(body, negated)

        if negated and atoms:
            # A negated class holding only a backreference
            return '.'
        if negated:
            return '(?s:.)'
        if self._quantifier_follows():
            return '(?:(?!))'
        return '(?!)'


def translate(pattern: str, flags: str = "") -> str:
    """Translate JavaScript RegExp source into an equivalent ``regex`` pattern.

    Only the ``m`` and ``s`` flags affect the text; the rest are engine flags.
    """
    translator = JSRegexTranslator(pattern, flags)
    result = translator.translate()

    wrap = translator.state.optional_groups & translator.state.backreferences
    if wrap:
        result = JSRegexTranslator(pattern, flags, frozenset(wrap)).translate()
    return result


# =============================================================================
# Main
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Translate JavaScript RegExp source into a Python regex pattern"
    )
    parser.add_argument(
        "--pattern", "-p",
        required=True,
        help="The JavaScript pattern source (without slashes or flags)"
    )
    parser.add_argument(
        "--flags", "-f",
        default="",
        help="JavaScript flags, e.g. 'gm' (only m and s change the output)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--check", "-c",
        action="store_true",
        help="Compile the translated pattern with the regex module"
    )

    args = parser.parse_args()

    result = translate(args.pattern, args.flags)

    if args.check:
        try:
            regex.compile(result)
        except regex.error as e:
            print(f"Error compiling translated pattern {result!r}: {e}", file=sys.stderr)
            sys.exit(1)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result + "\n")
        print(f"Translated pattern written to {args.output}")
    else:
        print(result)


if __name__ == "__main__":
    main()
