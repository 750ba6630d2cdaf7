"""
Enumerations for style-import.

Defines the closed set of naming conventions used to derive style file names
from component identifiers, and the build commands a host can run under.
"""

import re
from enum import Enum
from typing import Optional


class NamingConvention(str, Enum):
  """
  Supported identifier case conversions.

  Values use the kebab spelling. `parse` also accepts the camel spellings used
  by JavaScript tooling (``paramCase``, ``pascalCase``, ...).
  """

  CAMEL = "camel-case"  # myButton
  CAPITAL = "capital-case"  # My Button
  CONSTANT = "constant-case"  # MY_BUTTON
  DOT = "dot-case"  # my.button
  HEADER = "header-case"  # My-Button
  NO = "no-case"  # my button
  KEBAB = "kebab-case"  # my-button
  PASCAL = "pascal-case"  # MyButton
  PATH = "path-case"  # my/button
  SENTENCE = "sentence-case"  # My button
  SNAKE = "snake-case"  # my_button

  @classmethod
  def parse(cls, tag: Optional[str]) -> Optional["NamingConvention"]:
    """
    Resolves a convention tag in any common spelling.

    Args:
        tag (Optional[str]): e.g. "kebab-case", "paramCase", "SNAKE_CASE".

    Returns:
        Optional[NamingConvention]: The convention, or None if unsupported.
    """
    if isinstance(tag, cls):
      return tag
    if not isinstance(tag, str):
      return None
    key = re.sub(r"[\s_\-]", "", tag).lower()
    return _CONVENTION_KEYS.get(key)


_CONVENTION_KEYS = {re.sub(r"-", "", member.value): member for member in NamingConvention}
# change-case calls kebab "param case"
_CONVENTION_KEYS["paramcase"] = NamingConvention.KEBAB


class BuildCommand(str, Enum):
  """
  The host command a build runs under.

  Deep import rewriting only happens for `BUILD`.
  """

  BUILD = "build"
  SERVE = "serve"
