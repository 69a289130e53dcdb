from __future__ import annotations

import pytest

from outline.models import SymbolKind
from parse.pipeline import outline_source

pytest.importorskip("tree_sitter_swift")


def test_swift_types_members_and_protocols() -> None:
    source = """import Foundation

/// A counter.
public struct Counter: Equatable {
  var value: Int = 0

  init(start: Int) {
    value = start
  }

  func increment() -> Int {
    return value + 1
  }
}

protocol Named {
  var name: String { get }
  func describe() -> String
}
"""

    result = outline_source(source.encode("utf-8"), "swift")
    lines = result.text.splitlines()

    assert lines[:2] == ["import Foundation // line 1", ""]
    assert "/// A counter." in lines
    assert "public struct Counter: Equatable { // line 4" in lines
    assert "  var value: Int // line 5" in lines
    assert "  init(start: Int) { // line 7" in lines
    assert "  func increment() -> Int { // line 11" in lines
    assert "protocol Named { // line 16" in lines
    assert "  func describe() -> String // line 18" in lines

    counter = next(s for s in result.document.symbols if s.name == "Counter")
    assert counter.kind is SymbolKind.STRUCT
    assert [child.kind for child in counter.children] == [
        SymbolKind.FIELD,
        SymbolKind.INITIALIZER,
        SymbolKind.METHOD,
    ]


def test_swift_doc_runs_stop_at_blank_lines() -> None:
    source = """// file header

/// Adds two values.
/// Overflow traps.
func add(a: Int, b: Int) -> Int {
  return a + b
}
"""

    lines = outline_source(source.encode("utf-8"), "swift").text.splitlines()

    assert lines[:3] == [
        "/// Adds two values.",
        "/// Overflow traps.",
        "func add(a: Int, b: Int) -> Int { // line 5",
    ]
    assert not any("file header" in line for line in lines)
