"""Minimal English inflection for model, table and association names."""

import re

_IRREGULAR = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
}
_IRREGULAR_PLURALS = {plural: singular for singular, plural in _IRREGULAR.items()}

# Checked in order, first match wins.
_SINGULAR_RULES = [
    ("ies", "y"),
    ("sses", "ss"),
    ("uses", "us"),
    ("xes", "x"),
    ("ches", "ch"),
    ("shes", "sh"),
    ("ss", "ss"),
    ("us", "us"),
    ("s", ""),
]


def underscore(name: str) -> str:
    """Convert a CamelCase name to snake_case."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.replace("-", "_").lower()


def camelize(name: str) -> str:
    """Convert a snake_case name to CamelCase."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def singularize(word: str) -> str:
    """Return the singular form of the last word in a snake_case name."""
    head, _, last = word.rpartition("_")
    prefix = f"{head}_" if head else ""

    if last in _IRREGULAR_PLURALS:
        return prefix + _IRREGULAR_PLURALS[last]

    for suffix, replacement in _SINGULAR_RULES:
        if last.endswith(suffix):
            return prefix + last[: len(last) - len(suffix)] + replacement
    return word


def pluralize(word: str) -> str:
    """Return the plural form of the last word in a snake_case name."""
    head, _, last = word.rpartition("_")
    prefix = f"{head}_" if head else ""

    if last in _IRREGULAR:
        return prefix + _IRREGULAR[last]
    if re.search(r"[^aeiou]y$", last):
        return prefix + last[:-1] + "ies"
    if re.search(r"(s|x|ch|sh)$", last):
        return prefix + last + "es"
    return prefix + last + "s"


def tableize(model_name: str) -> str:
    """Derive the conventional table name for a model, e.g. ``OrderItem`` -> ``order_items``."""
    return pluralize(underscore(model_name))


def classify(association_name: str) -> str:
    """Derive a model name from a plural association name, e.g. ``order_items`` -> ``OrderItem``."""
    return camelize(singularize(association_name))
