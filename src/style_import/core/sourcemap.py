"""
Source Map (Revision 3) model and VLQ mapping codec.

Mappings are handled as decoded lines of absolute segments
``(generated_column, source_index, original_line, original_column)`` with
0-based values; `encode_mappings` applies the delta + Base64 VLQ encoding.
"""

import base64
import json
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

Segment = Tuple[int, int, int, int]

_B64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_INDEX = {ch: i for i, ch in enumerate(_B64)}
_VLQ_SHIFT = 5
_VLQ_CONTINUATION = 1 << _VLQ_SHIFT
_VLQ_MASK = _VLQ_CONTINUATION - 1


def encode_vlq(value: int) -> str:
  """
  Encodes one signed integer as Base64 VLQ.

  Args:
      value (int): e.g. 16.

  Returns:
      str: e.g. "gB".
  """
  vlq = (-value << 1) | 1 if value < 0 else value << 1
  out = []
  while True:
    digit = vlq & _VLQ_MASK
    vlq >>= _VLQ_SHIFT
    if vlq:
      digit |= _VLQ_CONTINUATION
    out.append(_B64[digit])
    if not vlq:
      return "".join(out)


def decode_vlq(text: str) -> List[int]:
  """
  Decodes a run of Base64 VLQ values (one segment).

  Raises:
      ValueError: On characters outside the Base64 alphabet or truncated values.
  """
  values = []
  shift = 0
  vlq = 0
  for ch in text:
    if ch not in _B64_INDEX:
      raise ValueError(f"Invalid base64 VLQ character: {ch!r}")
    digit = _B64_INDEX[ch]
    vlq |= (digit & _VLQ_MASK) << shift
    if digit & _VLQ_CONTINUATION:
      shift += _VLQ_SHIFT
      continue
    value = vlq >> 1
    values.append(-value if vlq & 1 else value)
    vlq = shift = 0
  if shift:
    raise ValueError("Truncated base64 VLQ value")
  return values


def encode_mappings(lines: Sequence[Sequence[Segment]]) -> str:
  prev_source = prev_line = prev_column = 0
  encoded_lines = []
  for segments in lines:
    prev_gen_column = 0
    encoded = []
    for gen_column, source, line, column in segments:
      encoded.append(
        encode_vlq(gen_column - prev_gen_column)
        + encode_vlq(source - prev_source)
        + encode_vlq(line - prev_line)
        + encode_vlq(column - prev_column)
      )
      prev_gen_column, prev_source, prev_line, prev_column = gen_column, source, line, column
    encoded_lines.append(",".join(encoded))
  return ";".join(encoded_lines)


def decode_mappings(mappings: str) -> List[List[Segment]]:
  """
  Decodes a ``mappings`` string into absolute segments per generated line.

  Only 4-field segments are kept; 1-field (unmapped) and name indexes are dropped.
  """
  source = line = column = 0
  result: List[List[Segment]] = []
  for raw_line in mappings.split(";"):
    gen_column = 0
    segments: List[Segment] = []
    for raw in raw_line.split(","):
      if not raw:
        continue
      values = decode_vlq(raw)
      gen_column += values[0]
      if len(values) < 4:
        continue
      source += values[1]
      line += values[2]
      column += values[3]
      segments.append((gen_column, source, line, column))
    result.append(segments)
  return result


class SourceMap(BaseModel):
  """
  A version 3 source map.
  """

  version: int = 3
  file: Optional[str] = Field(None, description="Name of the generated file.")
  sources: List[str] = Field(default_factory=list)
  sourcesContent: Optional[List[Optional[str]]] = Field(None, description="Inlined original sources.")
  names: List[str] = Field(default_factory=list)
  mappings: str = ""

  def to_json(self) -> str:
    return json.dumps(self.model_dump(exclude_none=True), ensure_ascii=False)

  def to_url(self) -> str:
    """
    Renders the map as a base64 ``data:`` URL for inline ``sourceMappingURL`` comments.
    """
    payload = base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")
    return f"data:application/json;charset=utf-8;base64,{payload}"

  def decoded(self) -> List[List[Segment]]:
    return decode_mappings(self.mappings)
