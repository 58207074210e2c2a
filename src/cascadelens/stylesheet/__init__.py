from cascadelens.stylesheet.parser import parse_declarations, parse_rules
from cascadelens.stylesheet.model import (
    Element,
    ParsedStyleSheet,
    StyleSheet,
    UnreadableStyleSheet,
)

__all__ = [
    "parse_rules",
    "parse_declarations",
    "Element",
    "StyleSheet",
    "ParsedStyleSheet",
    "UnreadableStyleSheet",
]
