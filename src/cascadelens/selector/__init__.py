from cascadelens.selector.calculator import inline_specificity, specificity_of
from cascadelens.selector.tokenizer import (
    FunctionalSpan,
    NormalizedSelector,
    normalize,
    split_selector_list,
    strip_attributes,
)

__all__ = [
    "specificity_of",
    "inline_specificity",
    "normalize",
    "split_selector_list",
    "strip_attributes",
    "FunctionalSpan",
    "NormalizedSelector",
]
