"""
Tests for the Source Map model and VLQ codec.
"""

import json

import pytest

from style_import.core.sourcemap import SourceMap, decode_mappings, decode_vlq, encode_mappings, encode_vlq


@pytest.mark.parametrize("value, encoded", [(0, "A"), (1, "C"), (-1, "D"), (15, "e"), (16, "gB"), (123, "2H")])
def test_encode_vlq(value, encoded):
  assert encode_vlq(value) == encoded
  assert decode_vlq(encoded) == [value]


def test_decode_segment():
  assert decode_vlq("AAAA") == [0, 0, 0, 0]
  assert decode_vlq("gBD") == [16, -1]


@pytest.mark.parametrize("text", ["g", "!"])
def test_decode_invalid(text):
  with pytest.raises(ValueError):
    decode_vlq(text)


def test_mappings_are_delta_encoded():
  lines = [[(0, 0, 0, 0)], [(0, 0, 1, 0), (4, 0, 1, 4)]]
  assert encode_mappings(lines) == "AAAA;AACA,IAAI"
  assert decode_mappings("AAAA;AACA,IAAI") == lines


def test_empty_lines():
  assert encode_mappings([[], [(0, 0, 0, 0)]]) == ";AAAA"
  assert decode_mappings(";AAAA") == [[], [(0, 0, 0, 0)]]


def test_source_map_serialization():
  smap = SourceMap(file="a.js", sources=["/src/a.js"], sourcesContent=["x"], mappings="AAAA")
  data = json.loads(smap.to_json())

  assert data == {
    "version": 3,
    "file": "a.js",
    "sources": ["/src/a.js"],
    "sourcesContent": ["x"],
    "names": [],
    "mappings": "AAAA",
  }
  assert smap.to_url().startswith("data:application/json;charset=utf-8;base64,")
