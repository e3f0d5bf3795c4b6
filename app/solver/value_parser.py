"""
solver/value_parser.py

Expansion of engineering suffixes into multiplicative expressions.

This is literal text substitution, not numeric parsing: every occurrence of
a suffix letter is rewritten, wherever it appears, and anything else passes
through untouched. Evaluating the resulting expression is the solver's job.
"""

# Applied in this order, each on the output of the previous step.
# 'M' must be handled before 'm'.
SUFFIX_SUBSTITUTIONS = (
    ("k", "*1000"),
    ("M", "*1000000"),
    ("m", "*0.001"),
    ("u", "*0.000001"),
    ("n", "*0.000000001"),
    ("p", "*0.000000000001"),
)


def is_blank(raw) -> bool:
    """Return True for None, empty and whitespace-only values."""
    return raw is None or not str(raw).strip()


def expand_value(raw: str) -> str:
    """Rewrite suffix letters in a raw value.

    >>> expand_value("1k")
    '1*1000'
    >>> expand_value("4.7n")
    '4.7*0.000000001'
    """
    expanded = str(raw)
    for suffix, factor in SUFFIX_SUBSTITUTIONS:
        expanded = expanded.replace(suffix, factor)
    return expanded
