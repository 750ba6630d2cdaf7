"""
Identifier Naming Conventions.

Splits identifiers such as ``MyButton`` or ``HTMLInput`` into words and
re-joins them in the requested `NamingConvention`. Each convention maps to a
pure function in `CONVERTERS`; unknown tags convert to the identity.
"""

import re
from typing import Callable, Dict, List, Optional, Union

from style_import.enums import NamingConvention
from style_import.utils.console import log_debug

# Word boundaries: "aB" / "1B" and "ABc" (acronym followed by a word).
_SPLIT_RE = [re.compile(r"([a-z0-9])([A-Z])"), re.compile(r"([A-Z])([A-Z][a-z])")]
_STRIP_RE = re.compile(r"[^A-Za-z0-9]+")


def split_words(value: str) -> List[str]:
  """
  Splits an identifier into its words.

  Args:
      value (str): Identifier such as "ElButton" or "date_picker".

  Returns:
      List[str]: Words in original casing, e.g. ["El", "Button"].
  """
  result = value
  for regex in _SPLIT_RE:
    result = regex.sub(lambda m: f"{m.group(1)}\0{m.group(2)}", result)
  result = _STRIP_RE.sub("\0", result)
  return [word for word in result.split("\0") if word]


def _capitalize(word: str) -> str:
  return word[:1].upper() + word[1:].lower()


def _camel(words: List[str]) -> str:
  return "".join(word.lower() if i == 0 else _capitalize(word) for i, word in enumerate(words))


CONVERTERS: Dict[NamingConvention, Callable[[List[str]], str]] = {
  NamingConvention.CAMEL: _camel,
  NamingConvention.CAPITAL: lambda words: " ".join(_capitalize(w) for w in words),
  NamingConvention.CONSTANT: lambda words: "_".join(w.upper() for w in words),
  NamingConvention.DOT: lambda words: ".".join(w.lower() for w in words),
  NamingConvention.HEADER: lambda words: "-".join(_capitalize(w) for w in words),
  NamingConvention.NO: lambda words: " ".join(w.lower() for w in words),
  NamingConvention.KEBAB: lambda words: "-".join(w.lower() for w in words),
  NamingConvention.PASCAL: lambda words: "".join(_capitalize(w) for w in words),
  NamingConvention.PATH: lambda words: "/".join(w.lower() for w in words),
  NamingConvention.SENTENCE: lambda words: " ".join(
    _capitalize(w) if i == 0 else w.lower() for i, w in enumerate(words)
  ),
  NamingConvention.SNAKE: lambda words: "_".join(w.lower() for w in words),
}


def convert_case(value: str, convention: Union[NamingConvention, str]) -> str:
  """
  Converts an identifier to the given naming convention.

  Args:
      value (str): The identifier, e.g. "MyButton".
      convention (Union[NamingConvention, str]): Target convention or tag.

  Returns:
      str: The converted name.

  Raises:
      ValueError: If the convention is not supported.
  """
  resolved = NamingConvention.parse(convention)
  if resolved is None:
    raise ValueError(f"Unsupported naming convention: {convention!r}")
  return CONVERTERS[resolved](split_words(value))


def get_change_case_name(value: str, convention: Optional[Union[NamingConvention, str]]) -> str:
  """
  Converts an identifier, falling back to the raw identifier on failure.

  Args:
      value (str): The identifier.
      convention: Target convention tag.

  Returns:
      str: Converted name, or `value` unchanged if conversion is impossible.
  """
  try:
    return convert_case(value, convention)
  except (ValueError, TypeError) as e:
    log_debug("change-case fallback for %r: %s", value, e)
    return value
