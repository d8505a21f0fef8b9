import logging  # debug log for rejected lines
import re  # greedy numeric tokens
import sys  # stdin

logger = logging.getLogger(__name__)

_GREEDY = {  # Longest prefix a typed part consumes when no literal follows it.
    int: re.compile(r"[+-]?\d+"),
    float: re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)"),
}

class Char:  # Pattern part matching exactly one character.
    pass

class Opt:  # Pattern part: literal that may be absent.
    def __init__(self, literal):
        self.literal = literal

    def __repr__(self): return f"Opt({self.literal!r})"

class Repeat:  # Pattern part: sub-pattern matched as many times as possible, output as a list.
    def __init__(self, *parts):
        self.parts = parts

    def __repr__(self): return f"Repeat{self.parts!r}"

class InputPattern:  # Greedy left-to-right matcher over literals and typed parts.
    """Match a line against literals and typed fields.

    Parts are literal strings, `Opt(literal)`, `Repeat(*parts)`, or converters
    (`int`, `float`, `str`, `Char`, any callable taking a string). A converter
    followed by a literal or an `Opt` consumes up to the first occurrence of
    that literal (all of the text when an optional literal is absent);
    otherwise it consumes greedily: digits for numbers, one character for
    `Char`, the rest of the line for anything else.

    `Repeat` followed by a literal matches its sub-pattern against everything
    before that literal; otherwise it applies the sub-pattern while it keeps
    matching. There is no backtracking.
    """

    def __init__(self, *parts):
        self.parts = parts

    def __repr__(self): return f"InputPattern{self.parts!r}"

    def _take(self, part, text, follow):  # Split one typed token off the front of text.
        lit = follow.literal if isinstance(follow, Opt) else follow
        if isinstance(lit, str):
            idx = text.find(lit)
            if idx >= 0:
                return text[:idx], text[idx:]
            return (text, "") if isinstance(follow, Opt) else None
        if part is Char:
            return (text[:1], text[1:]) if text else None
        rx = _GREEDY.get(part)
        if rx is None:
            return text, ""
        m = rx.match(text)
        return (m.group(), text[m.end():]) if m else None

    @staticmethod
    def _collect(inner, text):  # Apply inner repeatedly; (items, rest).
        items = []
        while text:
            res = inner.parse_prefix(text)
            if res is None or res[1] == text:
                break
            items.append(res[0])
            text = res[1]
        return items, text

    def _repeat(self, part, text, follow):  # (items, rest) for a Repeat part, or None.
        inner = InputPattern(*part.parts)
        if isinstance(follow, str):
            idx = text.find(follow)
            if idx < 0:
                return None
            items, left = self._collect(inner, text[:idx])
            return (items, text[idx:]) if left == "" else None
        return self._collect(inner, text)

    def parse_prefix(self, text):  # (output, rest) for the matched prefix, or None.
        out = []
        for k, part in enumerate(self.parts):
            if isinstance(part, str):
                if not text.startswith(part):
                    return None
                text = text[len(part):]
                continue
            if isinstance(part, Opt):
                if text.startswith(part.literal):
                    text = text[len(part.literal):]
                continue
            follow = self.parts[k + 1] if k + 1 < len(self.parts) else None
            if isinstance(part, Repeat):
                taken = self._repeat(part, text, follow)
                if taken is None:
                    return None
                items, text = taken
                out.append(items)
                continue
            taken = self._take(part, text, follow)
            if taken is None:
                return None
            token, text = taken
            if part is Char:
                if len(token) != 1:
                    return None
                out.append(token)
                continue
            try:
                out.append(part(token))
            except (TypeError, ValueError):
                return None
        return (out[0] if len(out) == 1 else tuple(out)), text

    def parse_all(self, text):  # Output when the whole text matches, else None.
        res = self.parse_prefix(text)
        if res is None or res[1] != "":
            return None
        return res[0]

class Input:  # Line reader with a one-line lookahead cache.
    def __init__(self, stream):
        self.stream = stream
        self._line = None

    @classmethod
    def from_stdin(cls): return cls(sys.stdin)

    def peek_line(self):  # Next line without consuming it; EOFError at end of input.
        if self._line is None:
            raw = self.stream.readline()
            if raw == "":
                raise EOFError("end of input")
            self._line = raw.rstrip("\r\n")
        return self._line

    def read_line(self):  # Consume and return the next line.
        line = self.peek_line()
        self._line = None
        return line

    def parse_line(self, type_):  # Convert the next line; on failure the line stays buffered.
        value = type_(self.peek_line())
        self._line = None
        return value

    def parse_line_opt(self, type_):
        try:
            return self.parse_line(type_)
        except EOFError:
            return None
        except ValueError:
            logger.debug("line %r is not a %s", self._line, getattr(type_, "__name__", type_))
            return None

    def match_line(self, pattern):  # Match the next line against an InputPattern; ValueError if it does not.
        line = self.peek_line()
        value = pattern.parse_all(line)
        if value is None:
            raise ValueError(f"line {line!r} does not match {pattern!r}")
        self._line = None
        return value

    def match_line_opt(self, pattern):
        try:
            return self.match_line(pattern)
        except EOFError:
            return None
        except ValueError as e:
            logger.debug("%s", e)
            return None

    def match_lines(self, pattern, min_count=0, max_count=None):  # Consecutive matching lines.
        out = []
        while max_count is None or len(out) < max_count:
            value = self.match_line_opt(pattern)
            if value is None:
                break
            out.append(value)
        if len(out) < min_count:
            raise ValueError(f"{len(out)} lines matched {pattern!r}, expected at least {min_count}")
        return out

def spaced(items): return " ".join(str(x) for x in items)  # Space-separated rendering for answers.
