from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import rcssmin
import tinycss2

from tokenizors.core.errors import AdapterInputError
from tokenizors.core.ports.minifier import CssOutput


_CLOSERS = {"{": "}", "[": "]", "(": ")"}


def _describe(node: Any) -> str:
    return f"{node.source_line}:{node.source_column}: {node.message}"


def _unclosed(code: str) -> list[str]:
    """Report brackets still open at the end of ``code``.

    tinycss2 closes such blocks silently. Comments, strings and escapes are
    skipped; stray closers are left to tinycss2, which reports them.
    """
    stack: list[tuple[str, int]] = []
    i, n = 0, len(code)
    while i < n:
        ch = code[i]
        if code.startswith("/*", i):
            end = code.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue
        if ch in "\"'":
            i += 1
            while i < n and code[i] not in (ch, "\n"):
                i += 2 if code[i] == "\\" else 1
            i += 1
            continue
        if ch == "\\":
            i += 2
            continue
        if ch in _CLOSERS:
            stack.append((ch, i))
        elif stack and ch == _CLOSERS[stack[-1][0]]:
            stack.pop()
        i += 1

    errors = []
    for opener, pos in stack:
        line = code.count("\n", 0, pos) + 1
        column = pos - code.rfind("\n", 0, pos)
        errors.append(f"{line}:{column}: Unclosed {opener}")
    return errors


def _errors_in(nodes: Iterable[Any]) -> list[Any]:
    found = []
    for node in nodes:
        if node.type == "error":
            found.append(node)
        elif node.type == "function":
            found.extend(_errors_in(node.arguments))
        elif node.type in ("() block", "[] block"):
            found.extend(_errors_in(node.content))
    return found


class CssMinifier:
    """CSS minification with rcssmin, diagnosed with tinycss2.

    Implements the ``CssMinifierPort`` protocol. Stylesheet-level parse
    errors (stray or unclosed brackets, rules without a block, broken strings
    or urls in selectors) reject the input; parse errors inside declaration
    blocks are reported as warnings, since browsers drop only the offending
    declaration.
    """

    def minify(self, code: str) -> CssOutput:
        errors, warnings = self.diagnose(code)
        if errors:
            raise AdapterInputError("Invalid CSS.", "\n".join(errors))
        return CssOutput(code=rcssmin.cssmin(code), warnings=warnings)

    def diagnose(self, code: str) -> tuple[list[str], list[str]]:
        errors: list[str] = []
        warnings: list[str] = []
        for rule in tinycss2.parse_stylesheet(code, skip_comments=True, skip_whitespace=True):
            if rule.type == "error":
                errors.append(_describe(rule))
                continue
            errors.extend(_describe(e) for e in _errors_in(rule.prelude))
            if rule.content is not None:
                warnings.extend(self._block_warnings(rule.content))
        errors.extend(_unclosed(code))
        return errors, warnings

    def _block_warnings(self, content: list[Any]) -> list[str]:
        warnings: list[str] = []
        for item in tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True):
            if item.type == "error":
                warnings.append(_describe(item))
            elif item.type == "declaration":
                warnings.extend(_describe(e) for e in _errors_in(item.value))
            elif item.type in ("qualified-rule", "at-rule"):
                warnings.extend(_describe(e) for e in _errors_in(item.prelude))
                if item.content is not None:
                    warnings.extend(self._block_warnings(item.content))
        return warnings
