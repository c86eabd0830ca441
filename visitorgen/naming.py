import keyword
import re

# Keywords with a conventional spelled-out replacement.
_RESERVED_REPLACEMENTS = {
    "class": "klass",
}

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def short_name(type_name: str, prefix: str) -> str:
    """
    Strips the common hierarchy prefix, keeping the name whole if nothing
    would be left.
    """
    if prefix and type_name.startswith(prefix) and len(type_name) > len(prefix):
        return type_name[len(prefix):]
    return type_name


def method_name(type_name: str, prefix: str, verb: str) -> str:
    return f"{verb}{short_name(type_name, prefix)}"


def decapitalize(name: str) -> str:
    if not name:
        return name
    return name[0].lower() + name[1:]


def safe_name(name: str, reserved: frozenset[str] = frozenset()) -> str:
    """
    Makes a parameter name usable in generated code.

    `class` becomes `klass`; any other keyword, `self`, or a name listed in
    `reserved` gets a trailing underscore.
    """
    if name in _RESERVED_REPLACEMENTS:
        return _RESERVED_REPLACEMENTS[name]
    if keyword.iskeyword(name) or name == "self" or name in reserved:
        return f"{name}_"
    return name


def parameter_name(type_name: str, prefix: str, reserved: frozenset[str] = frozenset()) -> str:
    return safe_name(decapitalize(short_name(type_name, prefix)), reserved)


def snake_case(name: str) -> str:
    """
    NodeVisitorVoid -> node_visitor_void, HTTPNode -> http_node.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()
