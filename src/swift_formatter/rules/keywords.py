import re

DECLARATION_KEYWORDS = {
    "func", "class", "struct", "enum", "extension", "protocol",
    "init", "deinit", "subscript",
}

STATEMENT_KEYWORDS = {
    "if", "else", "for", "while", "repeat", "switch", "guard", "do", "catch", "defer",
}

MODIFIERS = {
    "private", "fileprivate", "internal", "public", "open", "static", "class",
    "final", "override", "mutating", "nonmutating", "required", "convenience",
    "indirect", "lazy", "dynamic", "optional", "weak", "unowned",
}

_ATTRIBUTE = re.compile(r"@\w+(\([^)]*\))?")
_WORD = re.compile(r"[A-Za-z_]\w*")


def first_keyword(code: str) -> str:
    """First word of a code line, skipping attributes, a leading '}' and modifiers.

    'class' counts as a modifier only when another declaration keyword follows.
    """
    code = _ATTRIBUTE.sub(" ", code).strip().lstrip("}").strip()
    words = _WORD.findall(code)
    for index, word in enumerate(words):
        if word in MODIFIERS:
            following = words[index + 1] if index + 1 < len(words) else ""
            if word == "class" and following not in DECLARATION_KEYWORDS and following not in MODIFIERS:
                return word
            continue
        return word
    return ""


def is_declaration(code: str) -> bool:
    return first_keyword(code) in DECLARATION_KEYWORDS
