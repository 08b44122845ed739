# Core type aliases for Kelp.
#
# Runtime values are the closed set of variants in kelp.types.values. The
# reader produces trees of the same variants, so code and data share one type;
# LispValue is used in evaluator/runtime code to denote evaluated values.

from kelp.types.values import Value

__version__ = "0.1.0"

LispValue = Value
