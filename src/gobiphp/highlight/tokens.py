"""PHP lexical vocabulary and the default colour theme."""

from typing import Dict, Tuple

from ..models.responses import TokenCategory

# Reserved words, matched case-sensitively as whole words
KEYWORDS: Tuple[str, ...] = (
    "abstract", "and", "array", "as", "break", "callable", "case", "catch",
    "class", "clone", "const", "continue", "declare", "default", "do", "echo",
    "else", "elseif", "empty", "enddeclare", "endfor", "endforeach", "endif",
    "endswitch", "endwhile", "eval", "exit", "extends", "final", "finally",
    "fn", "for", "foreach", "function", "global", "goto", "if", "implements",
    "include", "include_once", "instanceof", "insteadof", "interface", "isset",
    "list", "match", "namespace", "new", "or", "print", "private", "protected",
    "public", "readonly", "require", "require_once", "return", "static", "switch",
    "throw", "trait", "try", "unset", "use", "var", "while", "xor", "yield",
)

CONSTANTS: Tuple[str, ...] = ("true", "false", "null", "TRUE", "FALSE", "NULL")

# Colour names per category, for front ends that want the stock palette
DEFAULT_THEME: Dict[TokenCategory, str] = {
    TokenCategory.KEYWORD: "pink",
    TokenCategory.STRING: "green",
    TokenCategory.COMMENT: "gray",
    TokenCategory.NUMBER: "orange",
    TokenCategory.VARIABLE: "cyan",
    TokenCategory.CONSTANT: "purple",
    TokenCategory.PLAIN: "default",
}
