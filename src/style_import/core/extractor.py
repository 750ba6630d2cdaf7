"""
Import Binding Extraction.

Recovers the names an import (or re-export) statement binds from a module,
resolving ``as`` aliases back to the names the module actually exports::

    import { Button as Btn, Table } from 'ui'   ->  ["Button", "Table"]

Default and namespace bindings do not name a component export and are not
reported. Type-only specifiers are erased before runtime and are skipped too.
"""

import re
from dataclasses import dataclass
from typing import List

from style_import.core.scanner import ScanError, strip_comments

_STATEMENT_RE = re.compile(
  r"^\s*(?P<keyword>import|export)\s*(?P<clause>.*?)\s*\bfrom\s*(?P<quote>['\"]).*(?P=quote)\s*;?\s*$",
  re.S,
)
_BARE_IMPORT_RE = re.compile(r"^\s*import\s*['\"]")
_TYPE_ONLY_RE = re.compile(r"^type\s+(?!from\b)")
_IDENT_RE = re.compile(r"(?:[^\W\d]|\$)(?:\w|\$)*")
_TOKEN_RE = re.compile(r"'[^']*'|\"[^\"]*\"|[^\s]+")


@dataclass(frozen=True)
class Binding:
  """
  One named import binding.

  Attributes:
      imported (str): The name exported by the module (``Button``).
      local (str): The name bound in the importing file (``Btn``).
  """

  imported: str
  local: str


def _name(token: str, statement: str) -> str:
  if len(token) >= 2 and token[0] in "'\"" and token[-1] == token[0]:
    return token[1:-1]
  if not _IDENT_RE.fullmatch(token):
    raise ScanError(f"Invalid binding name {token!r}", statement, 0)
  return token


def _parse_specifier(part: str, statement: str) -> List[Binding]:
  tokens = _TOKEN_RE.findall(part)
  if not tokens:
    return []
  if tokens[0] == "type" and len(tokens) in (2, 4):
    return []
  if len(tokens) == 1:
    name = _name(tokens[0], statement)
    return [Binding(name, name)]
  if len(tokens) == 3 and tokens[1] == "as":
    return [Binding(_name(tokens[0], statement), _name(tokens[2], statement))]
  raise ScanError(f"Invalid import specifier {part.strip()!r}", statement, 0)


def extract_bindings(statement: str) -> List[Binding]:
  """
  Parses the named bindings of a single import or re-export statement.

  Args:
      statement (str): Statement text, e.g. ``import { A as B } from 'x'``.

  Returns:
      List[Binding]: Named bindings in source order.

  Raises:
      ScanError: If the statement is not a well-formed import/re-export.
  """
  if not statement:
    return []

  text = strip_comments(statement)
  if _BARE_IMPORT_RE.match(text):
    return []
  match = _STATEMENT_RE.match(text)
  if not match:
    raise ScanError("Not an import statement", statement, 0)

  clause = match.group("clause")
  if _TYPE_ONLY_RE.match(clause):
    return []

  open_idx = clause.find("{")
  close_idx = clause.rfind("}")
  if open_idx == -1 and close_idx == -1:
    return []
  if open_idx == -1 or close_idx < open_idx or clause.count("{") != 1 or clause.count("}") != 1:
    raise ScanError("Unbalanced braces in import clause", statement, 0)

  bindings: List[Binding] = []
  for part in clause[open_idx + 1 : close_idx].split(","):
    bindings.extend(_parse_specifier(part, statement))
  return bindings


def extract(statement: str) -> List[str]:
  """
  Returns the original (pre-alias) names imported by a statement.

  Args:
      statement (str): Raw import statement text.

  Returns:
      List[str]: e.g. ``["A", "C"]`` for ``import { A as B, C } from 'x'``.

  Raises:
      ScanError: If the statement is malformed.
  """
  return [binding.imported for binding in extract_bindings(statement)]
