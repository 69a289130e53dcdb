from __future__ import annotations

from outline.models import SymbolKind
from parse.pipeline import outline_source


def _lines(source: str, language: str) -> list[str]:
    return outline_source(source.encode("utf-8"), language).text.splitlines()


def test_javascript_exports_classes_and_bindings() -> None:
    source = """import fs from "fs";
const path = require("path");

// Adds two numbers.
export function add(a, b) {
  return a + b;
}

export class Store extends Base {
  static count = 0;

  constructor(root) {
    super();
  }

  async load(key) {
    return fs.readFileSync(key);
  }
}

const handler = async (event) => {
  const local = 1;
  return local;
};

export default function () {}
"""

    lines = _lines(source, "javascript")

    assert lines[:3] == [
        'import fs from "fs"; // line 1',
        'const path = require("path"); // line 2',
        "",
    ]
    assert "// Adds two numbers." in lines
    assert "export function add(a, b) { // line 5" in lines
    assert "export class Store extends Base { // line 9" in lines
    assert "  static count // line 10" in lines
    assert "  constructor(root) { // line 12" in lines
    assert "  async load(key) { // line 16" in lines
    assert "const handler = async (event) => { // line 21" in lines
    assert "export default function () { // line 26" in lines
    assert not any("local" in line for line in lines)


def test_typescript_interfaces_enums_and_aliases() -> None:
    source = """export interface Shape {
  area(): number;
  readonly name: string;
}

type ID = string | number;

enum Color {
  Red = 1,
  Green,
}

declare function greet(name: string): void;

namespace Geometry {
  export const origin: number = 0;
}

abstract class Base<T> implements Shape {
  protected abstract area(): number;
  private items: T[] = [];
}
"""

    lines = _lines(source, "typescript")

    assert "export interface Shape { // line 1" in lines
    assert "  area(): number // line 2" in lines
    assert "  readonly name: string // line 3" in lines
    assert "type ID = string | number // line 6" in lines
    assert "enum Color { // line 8" in lines
    assert "  Red = 1 // line 9" in lines
    assert "  Green // line 10" in lines
    assert "declare function greet(name: string): void // line 13" in lines
    assert "namespace Geometry { // line 15" in lines
    assert "  export const origin: number // line 16" in lines
    assert "abstract class Base<T> implements Shape { // line 19" in lines
    assert "  protected abstract area(): number // line 20" in lines
    assert "  private items: T[] // line 21" in lines


def test_tsx_uses_typescript_rules() -> None:
    source = """export function App(props: Props): JSX.Element {
  return <div>{props.title}</div>;
}
"""

    document = outline_source(source.encode("utf-8"), "tsx").document
    (app,) = document.symbols

    assert app.kind is SymbolKind.FUNCTION
    assert app.signature == "export function App(props: Props): JSX.Element"
    assert app.start_line == 1


def test_javascript_class_values_in_expressions_are_skipped() -> None:
    source = """foo(class { bar() {} });
function baz() {}
"""

    assert _lines(source, "javascript") == [
        "function baz() { // line 2",
        "  // ...",
        "}",
    ]


def test_javascript_require_after_plain_binding_keeps_both() -> None:
    source = """const a = 1, fs = require("fs");
"""

    symbols = outline_source(source.encode("utf-8"), "javascript").document.symbols

    assert [(symbol.kind, symbol.name) for symbol in symbols] == [
        (SymbolKind.VARIABLE, "a"),
        (SymbolKind.IMPORT, 'const a = 1, fs = require("fs");'),
    ]


def test_typescript_comment_runs_stop_at_blank_lines() -> None:
    source = """// stray note

// Parses one record.
// Throws on bad input.
function parse(raw: string): Record {
  return JSON.parse(raw);
}

/**
 * Formats a record.
 */
function format(record: Record): string {
  return String(record);
}
"""

    lines = _lines(source, "typescript")

    assert lines == [
        "// Parses one record.",
        "// Throws on bad input.",
        "function parse(raw: string): Record { // line 5",
        "  // ...",
        "}",
        "",
        "/**",
        "* Formats a record.",
        "*/",
        "function format(record: Record): string { // line 12",
        "  // ...",
        "}",
    ]
