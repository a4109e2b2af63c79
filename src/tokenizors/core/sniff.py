import re
from enum import Enum


class SourceKind(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"


_TYPE_ANNOTATION = re.compile(
    r":\s*(?:string|number|boolean|any|void|unknown|never|object|null|undefined|bigint|symbol|[A-Z]\w*)"
    r"(?:\[\])?\s*[,)=;{|&>\]]"
)
_INTERFACE_OR_TYPE = re.compile(r"(?:^|[\s;{}])(?:interface\s+[A-Za-z_$][\w$]*|type\s+[A-Za-z_$][\w$]*\s*(?:<[^>]*>)?\s*=)")
_ENUM = re.compile(r"(?:^|[\s;{}])(?:const\s+)?enum\s+[A-Za-z_$][\w$]*\s*\{")
_JSX_TAG = re.compile(
    r"(?:^|[\s(=,:?&|>]|return)\s*"
    r"(?:<[A-Za-z][\w.]*(?:\s+[\w:-]+(?:=(?:\"[^\"]*\"|'[^']*'|\{[^}]*\}))?)*\s*/?>|<>)"
)

_PATTERNS = (_TYPE_ANNOTATION, _INTERFACE_OR_TYPE, _ENUM, _JSX_TAG)


def detect_source_kind(code: str) -> SourceKind:
    """Guess whether ``code`` is TypeScript/TSX or plain JavaScript.

    Heuristic: any type annotation, ``interface``/``type`` declaration,
    ``enum`` declaration or JSX-like tag marks the input as TypeScript.
    Object literals such as ``{a: Foo, b: 1}`` look like annotations and are
    misclassified; callers accept that.
    """
    if any(pattern.search(code) for pattern in _PATTERNS):
        return SourceKind.TYPESCRIPT
    return SourceKind.JAVASCRIPT
