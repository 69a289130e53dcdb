"""Grammar adapters, one per supported language tag."""

from types import MappingProxyType

from outline.adapters.base import Action, Context, GrammarAdapter, Rule
from outline.adapters.c import CAdapter, CppAdapter
from outline.adapters.go import GoAdapter
from outline.adapters.java import JavaAdapter
from outline.adapters.javascript import JavaScriptAdapter
from outline.adapters.python import PythonAdapter
from outline.adapters.swift import SwiftAdapter
from outline.adapters.typescript import TsxAdapter, TypeScriptAdapter

ADAPTERS: MappingProxyType[str, type[GrammarAdapter]] = MappingProxyType(
    {
        adapter.language: adapter
        for adapter in (
            GoAdapter,
            JavaAdapter,
            JavaScriptAdapter,
            TypeScriptAdapter,
            TsxAdapter,
            PythonAdapter,
            SwiftAdapter,
            CAdapter,
            CppAdapter,
        )
    }
)

__all__ = [
    "ADAPTERS",
    "Action",
    "CAdapter",
    "Context",
    "CppAdapter",
    "GoAdapter",
    "GrammarAdapter",
    "JavaAdapter",
    "JavaScriptAdapter",
    "PythonAdapter",
    "Rule",
    "SwiftAdapter",
    "TsxAdapter",
    "TypeScriptAdapter",
]
