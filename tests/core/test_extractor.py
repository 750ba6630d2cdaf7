"""
Tests for Import Binding Extraction.

Verifies:
1. Aliases resolve to the originally exported names.
2. Default, namespace and type-only bindings are not reported.
3. Re-export statements are handled like imports.
4. Malformed clauses raise ScanError.
"""

import pytest

from style_import.core.extractor import Binding, extract, extract_bindings
from style_import.core.scanner import ScanError


@pytest.mark.parametrize(
  "statement, names",
  [
    ("import { A as B, C } from 'x'", ["A", "C"]),
    ("import { A } from 'x';", ["A"]),
    ("import{A as B,C}from'x'", ["A", "C"]),
    ("import Foo from 'x'", []),
    ("import * as ns from 'x'", []),
    ("import 'x'", []),
    ("import Foo, { Bar as Baz } from 'x'", ["Bar"]),
    ("import type { Props } from 'x'", []),
    ("import { type Props, Button } from 'x'", ["Button"]),
    ("import type from 'x'", []),
    ("export { A as B } from 'x'", ["A"]),
    ("export * from 'x'", []),
    ("import {\n  A, // first\n  B,\n} from 'x'", ["A", "B"]),
    ("import { 'my-comp' as MyComp } from 'x'", ["my-comp"]),
    ("", []),
  ],
)
def test_extract(statement, names):
  assert extract(statement) == names


def test_bindings_keep_local_alias():
  assert extract_bindings("import { A as Z, B } from 'x'") == [Binding("A", "Z"), Binding("B", "B")]


@pytest.mark.parametrize(
  "statement",
  [
    "import { A B } from 'x'",
    "import { A } 'x'",
    "import { A as 1x } from 'x'",
    "import { { A } } from 'x'",
    "import { A from 'x'",
  ],
)
def test_malformed_statements_raise(statement):
  with pytest.raises(ScanError):
    extract(statement)
