"""
ES Module Statement Scanner.

Provides `ModuleScanner`, a lightweight lexer that locates module statements in
JavaScript/TypeScript source without building a syntax tree. It understands
just enough of the lexical grammar (comments, string, template and regular
expression literals, bracket nesting) to avoid false matches inside them.

Detected constructs:

- Static imports (``import {a} from 'm'``, ``import 'm'``, ...).
- Re-exports (``export {a} from 'm'``), reported as imports.
- Dynamic imports (``import('m')``) and ``import.meta``.
- Exported names (``export const x``, ``export {a as b}``, ``export default``).

Offsets follow the usual bundler lexer layout: `s`/`e` delimit the module
specifier (without quotes for static imports), `ss`/`se` the whole statement.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Values of `ImportSpecifier.d` that are not a dynamic import offset.
STATIC_IMPORT = -1
IMPORT_META = -2

_QUOTES = "'\""
_CLOSERS = {"(": ")", "[": "]", "{": "}"}
_WS_RE = re.compile(r"\s+")
_IDENT_RE = re.compile(r"(?:[^\W\d]|\$)(?:\w|\$)*")
_NUMBER_RE = re.compile(r"\.?\d[\w.]*")

# After these words a `/` starts a regular expression, not a division.
_EXPRESSION_KEYWORDS = frozenset(
  {
    "await",
    "case",
    "delete",
    "do",
    "else",
    "in",
    "instanceof",
    "new",
    "of",
    "return",
    "throw",
    "typeof",
    "void",
    "yield",
  }
)

# A `)` closing the header of these statements is followed by a statement, not an operand.
_HEADER_KEYWORDS = frozenset({"for", "if", "while", "with"})


class ScanError(ValueError):
  """
  Raised when source text cannot be lexed.

  Attributes:
      line (int): 1-based line of the failure.
      column (int): 1-based column of the failure.
  """

  def __init__(self, message: str, source: str = "", pos: int = 0) -> None:
    self.line = source.count("\n", 0, pos) + 1
    self.column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    super().__init__(f"{message} at line {self.line}, col {self.column}")


@dataclass(frozen=True)
class ImportSpecifier:
  """
  A single module statement occurrence.

  Attributes:
      n (Optional[str]): Module specifier value, None if not a string literal.
      s (int): Start offset of the specifier.
      e (int): End offset of the specifier.
      ss (int): Start offset of the statement.
      se (int): End offset of the statement.
      d (int): `STATIC_IMPORT`, `IMPORT_META`, or the offset of a dynamic import's ``(``.
  """

  n: Optional[str]
  s: int
  e: int
  ss: int
  se: int
  d: int = STATIC_IMPORT

  @property
  def is_static(self) -> bool:
    return self.d == STATIC_IMPORT

  @property
  def is_dynamic(self) -> bool:
    return self.d >= 0


class _LexState:
  """
  What the lexer has just read, enough to tell a regex literal from a division.

  Attributes:
      regex_allowed (bool): Whether a ``/`` at the current position starts a regex.
      last_word (Optional[str]): Identifier of the previous token, if it was one.
      parens (List[bool]): For each open ``(``, whether it follows a header keyword.
  """

  __slots__ = ("regex_allowed", "last_word", "parens")

  def __init__(self) -> None:
    self.regex_allowed = True
    self.last_word: Optional[str] = None
    self.parens: List[bool] = []

  def expect(self, regex_allowed: bool) -> None:
    self.regex_allowed = regex_allowed
    self.last_word = None


class ModuleScanner:
  """
  Single-use scanner over one source text.

  Usage::

      imports, exports = ModuleScanner(code).scan()
  """

  def __init__(self, source: str) -> None:
    self.source = source
    self.length = len(source)
    self.imports: List[ImportSpecifier] = []
    self.exports: List[str] = []
    self._state = _LexState()

  def scan(self) -> Tuple[List[ImportSpecifier], List[str]]:
    """
    Lexes the whole source.

    Returns:
        Tuple[List[ImportSpecifier], List[str]]: Imports in source order and exported names.

    Raises:
        ScanError: On unterminated literals, comments or bracket groups.
    """
    pos = 0
    while pos < self.length:
      match = _IDENT_RE.match(self.source, pos)
      if match and not self._is_property_access(pos):
        word = match.group(0)
        if word == "import":
          pos = self._parse_import(pos, match.end())
          continue
        if word == "export":
          pos = self._parse_export(pos, match.end())
          continue
      pos = self._step(pos, self._state)
    return self.imports, self.exports

  # --- Lexical primitives ---

  def _step(self, pos: int, state: _LexState) -> int:
    """
    Skips one lexical element outside a bracket group, tracking parentheses.

    Returns:
        int: New offset.
    """
    src = self.source
    ch = src[pos]
    if ch == "(":
      state.parens.append(state.last_word in _HEADER_KEYWORDS)
      state.expect(True)
      return pos + 1
    if ch == ")":
      after_header = state.parens.pop() if state.parens else False
      state.expect(after_header)
      return pos + 1

    trivia = ch.isspace() or src.startswith("//", pos) or src.startswith("/*", pos)
    end, state.regex_allowed, word = self._advance(pos, state.regex_allowed)
    if not trivia:
      state.last_word = word
    return end

  def _advance(self, pos: int, regex_allowed: bool) -> Tuple[int, bool, Optional[str]]:
    """
    Skips one lexical element.

    Returns:
        Tuple[int, bool, Optional[str]]: New offset, whether a following ``/``
        starts a regex, and the identifier read (if any).
    """
    src = self.source
    ch = src[pos]

    ws = _WS_RE.match(src, pos)
    if ws:
      return ws.end(), regex_allowed, None
    if src.startswith("//", pos) or src.startswith("/*", pos):
      return self._skip_comment(pos), regex_allowed, None
    if ch in _QUOTES:
      return self._read_string(pos)[1], False, None
    if ch == "`":
      return self._skip_template(pos), False, None
    if ch == "/":
      if regex_allowed:
        return self._skip_regex(pos), False, None
      return pos + 1, True, None

    ident = _IDENT_RE.match(src, pos)
    if ident:
      word = ident.group(0)
      return ident.end(), word in _EXPRESSION_KEYWORDS, word
    number = _NUMBER_RE.match(src, pos)
    if number:
      return number.end(), False, None
    if src.startswith("++", pos) or src.startswith("--", pos):
      # Postfix keeps division, prefix keeps regex.
      return pos + 2, regex_allowed, None
    return pos + 1, ch not in ")]", None

  def _skip_trivia(self, pos: int) -> int:
    """Skips whitespace and comments."""
    src = self.source
    while pos < self.length:
      ws = _WS_RE.match(src, pos)
      if ws:
        pos = ws.end()
      elif src.startswith("//", pos) or src.startswith("/*", pos):
        pos = self._skip_comment(pos)
      else:
        break
    return pos

  def _skip_comment(self, pos: int) -> int:
    if self.source.startswith("//", pos):
      end = self.source.find("\n", pos)
      return self.length if end == -1 else end
    end = self.source.find("*/", pos + 2)
    if end == -1:
      raise ScanError("Unterminated comment", self.source, pos)
    return end + 2

  def _read_string(self, pos: int) -> Tuple[str, int]:
    """
    Reads a quoted string literal starting at `pos`.

    Returns:
        Tuple[str, int]: The unescaped value and the offset after the closing quote.
    """
    src = self.source
    quote = src[pos]
    chars = []
    i = pos + 1
    while i < self.length:
      ch = src[i]
      if ch == quote:
        return "".join(chars), i + 1
      if ch == "\\":
        if i + 1 < self.length and src[i + 1] != "\n":
          chars.append(src[i + 1])
        i += 2
        continue
      if ch in "\r\n":
        break
      chars.append(ch)
      i += 1
    raise ScanError("Unterminated string literal", src, pos)

  def _skip_template(self, pos: int) -> int:
    src = self.source
    i = pos + 1
    while i < self.length:
      ch = src[i]
      if ch == "\\":
        i += 2
      elif ch == "`":
        return i + 1
      elif src.startswith("${", i):
        i = self._skip_group(i + 1)
      else:
        i += 1
    raise ScanError("Unterminated template literal", src, pos)

  def _skip_regex(self, pos: int) -> int:
    src = self.source
    i = pos + 1
    in_class = False
    while i < self.length:
      ch = src[i]
      if ch == "\\":
        i += 2
        continue
      if ch in "\r\n":
        break
      if ch == "[":
        in_class = True
      elif ch == "]":
        in_class = False
      elif ch == "/" and not in_class:
        flags = _IDENT_RE.match(src, i + 1)
        return flags.end() if flags else i + 1
      i += 1
    raise ScanError("Unterminated regular expression", src, pos)

  def _skip_group(self, pos: int) -> int:
    """
    Skips a balanced bracket group opening at `pos`.

    Returns:
        int: Offset after the matching closing bracket.
    """
    stack = [(_CLOSERS[self.source[pos]], False)]
    state = _LexState()
    i = pos + 1
    while i < self.length:
      ch = self.source[i]
      if ch in _CLOSERS:
        stack.append((_CLOSERS[ch], ch == "(" and state.last_word in _HEADER_KEYWORDS))
        state.expect(True)
        i += 1
        continue
      if ch in ")]}":
        closer, after_header = stack.pop()
        if ch != closer:
          raise ScanError(f"Unexpected '{ch}'", self.source, i)
        i += 1
        if not stack:
          return i
        state.expect(after_header or ch == "}")
        continue
      i = self._step(i, state)
    raise ScanError("Unterminated bracket group", self.source, pos)

  def _is_property_access(self, pos: int) -> bool:
    """Checks for ``obj.import``-style member access (spread ``...`` excluded)."""
    i = pos - 1
    while i >= 0 and self.source[i].isspace():
      i -= 1
    if i < 0 or self.source[i] != ".":
      return False
    return self.source[max(0, i - 2) : i + 1] != "..."

  # --- Statements ---

  def _parse_import(self, start: int, kw_end: int) -> int:
    pos = self._skip_trivia(kw_end)
    if pos >= self.length:
      return pos
    ch = self.source[pos]

    if ch == "(":
      self._add_dynamic_import(start, pos)
      self._state.parens.append(False)
      self._state.expect(True)
      return pos + 1

    if ch == ".":
      meta_pos = self._skip_trivia(pos + 1)
      meta = _IDENT_RE.match(self.source, meta_pos)
      if meta and meta.group(0) == "meta":
        self.imports.append(ImportSpecifier(None, start, meta.end(), start, meta.end(), IMPORT_META))
        self._state.expect(False)
        return meta.end()
      return pos

    if ch in _QUOTES:
      return self._add_static_import(start, pos)

    return self._parse_import_clause(start, pos)

  def _parse_import_clause(self, start: int, pos: int) -> int:
    while True:
      pos = self._skip_trivia(pos)
      if pos >= self.length:
        raise ScanError("Unexpected end of input in import statement", self.source, start)
      ch = self.source[pos]
      if ch == "{":
        pos = self._skip_group(pos)
        continue
      if ch in "*,":
        pos += 1
        continue

      word = _IDENT_RE.match(self.source, pos)
      if not word:
        # e.g. TypeScript `import x = require('m')`; not a module statement.
        self._state.expect(True)
        return pos
      pos = word.end()
      if word.group(0) == "from":
        spec_pos = self._skip_trivia(pos)
        if spec_pos < self.length and self.source[spec_pos] in _QUOTES:
          return self._add_static_import(start, spec_pos)

  def _add_static_import(self, start: int, spec_pos: int) -> int:
    value, end = self._read_string(spec_pos)
    self.imports.append(ImportSpecifier(value, spec_pos + 1, end - 1, start, end, STATIC_IMPORT))
    self._state.expect(True)
    return end

  def _add_dynamic_import(self, start: int, paren: int) -> None:
    end = self._skip_group(paren)
    arg = self._skip_trivia(paren + 1)
    value = None
    arg_end = end - 1
    if arg < self.length and self.source[arg] in _QUOTES:
      literal, literal_end = self._read_string(arg)
      follow = self._skip_trivia(literal_end)
      if follow < self.length and self.source[follow] in ",)":
        value = literal
        arg_end = literal_end
    self.imports.append(ImportSpecifier(value, arg, arg_end, start, end, paren))

  def _parse_export(self, start: int, kw_end: int) -> int:
    pos = self._skip_trivia(kw_end)
    self._state.expect(True)
    if pos >= self.length:
      return pos
    ch = self.source[pos]

    if ch == "{":
      end = self._skip_group(pos)
      self.exports.extend(_exported_names(self.source[pos + 1 : end - 1]))
      return self._parse_reexport_source(start, end)

    if ch == "*":
      pos = self._skip_trivia(pos + 1)
      alias = _IDENT_RE.match(self.source, pos)
      if alias and alias.group(0) == "as":
        name_pos = self._skip_trivia(alias.end())
        if name_pos < self.length and self.source[name_pos] in _QUOTES:
          name, pos = self._read_string(name_pos)
          self.exports.append(name)
        else:
          name_match = _IDENT_RE.match(self.source, name_pos)
          if name_match:
            self.exports.append(name_match.group(0))
            pos = name_match.end()
      return self._parse_reexport_source(start, pos)

    word = _IDENT_RE.match(self.source, pos)
    if not word:
      return pos
    keyword = word.group(0)
    pos = word.end()

    if keyword == "default":
      self.exports.append("default")
      return pos
    if keyword == "async":
      follow = _IDENT_RE.match(self.source, self._skip_trivia(pos))
      if not follow or follow.group(0) != "function":
        return pos
      keyword, pos = "function", follow.end()
    if keyword == "function":
      pos = self._skip_trivia(pos)
      if pos < self.length and self.source[pos] == "*":
        pos += 1
      return self._read_declared_name(pos)
    if keyword == "class":
      return self._read_declared_name(pos)
    if keyword in ("const", "let", "var"):
      return self._read_declared_binding(pos)
    return pos

  def _parse_reexport_source(self, start: int, pos: int) -> int:
    from_pos = self._skip_trivia(pos)
    word = _IDENT_RE.match(self.source, from_pos)
    if word and word.group(0) == "from":
      spec_pos = self._skip_trivia(word.end())
      if spec_pos < self.length and self.source[spec_pos] in _QUOTES:
        return self._add_static_import(start, spec_pos)
    return pos

  def _read_declared_name(self, pos: int) -> int:
    pos = self._skip_trivia(pos)
    name = _IDENT_RE.match(self.source, pos)
    if not name:
      return pos
    self.exports.append(name.group(0))
    return name.end()

  def _read_declared_binding(self, pos: int) -> int:
    pos = self._skip_trivia(pos)
    if pos < self.length and self.source[pos] in "{[":
      end = self._skip_group(pos)
      self.exports.extend(_pattern_names(self.source[pos + 1 : end - 1]))
      return end
    return self._read_declared_name(pos)


def _drop_comments(text: str) -> str:
  return re.sub(r"/\*.*?\*/|//[^\n]*", " ", text, flags=re.S)


def _unquote(name: str) -> str:
  if len(name) >= 2 and name[0] in _QUOTES and name[-1] == name[0]:
    return name[1:-1]
  return name


def _exported_names(inner: str) -> List[str]:
  """Names exported by an ``export { ... }`` clause body."""
  names = []
  for part in _drop_comments(inner).split(","):
    tokens = part.split()
    if not tokens:
      continue
    if tokens[0] == "type" and len(tokens) in (2, 4):
      continue
    if len(tokens) >= 3 and tokens[-2] == "as":
      names.append(_unquote(tokens[-1]))
    else:
      names.append(_unquote(tokens[0]))
  return names


def _pattern_names(inner: str) -> List[str]:
  """Binding names declared by a destructuring pattern body (``a, b: c, ...d``)."""
  names = []
  text = _drop_comments(inner)
  for match in _IDENT_RE.finditer(text):
    follow = text[match.end() :].lstrip()
    if follow.startswith(":"):
      continue
    before = text[: match.start()].rstrip()
    if before.endswith("="):
      continue
    names.append(match.group(0))
  return names


def scan(source: str) -> Tuple[List[ImportSpecifier], List[str]]:
  """
  Scans source text for module statements.

  Args:
      source (str): JavaScript or TypeScript source.

  Returns:
      Tuple[List[ImportSpecifier], List[str]]: Import records and exported names.

  Raises:
      ScanError: If the source cannot be lexed.
  """
  return ModuleScanner(source).scan()


def strip_comments(source: str) -> str:
  """
  Blanks out comments while leaving string, template and regex literals intact.

  Offsets are preserved: each comment character becomes a space (newlines are kept).

  Args:
      source (str): Source text.

  Returns:
      str: Text of the same length without comments.

  Raises:
      ScanError: If the source cannot be lexed.
  """
  scanner = ModuleScanner(source)
  out = []
  pos = 0
  state = _LexState()
  while pos < scanner.length:
    if source.startswith("//", pos) or source.startswith("/*", pos):
      end = scanner._skip_comment(pos)
      out.append(re.sub(r"[^\n]", " ", source[pos:end]))
      pos = end
      continue
    end = scanner._step(pos, state)
    out.append(source[pos:end])
    pos = end
  return "".join(out)
