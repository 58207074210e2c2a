from cascadelens.lint.linter import RuleFunc, lint
from cascadelens.lint.rules import ALL_RULES

__all__ = ["ALL_RULES", "RuleFunc", "lint"]
