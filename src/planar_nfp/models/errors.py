"""Contract violations raised by the geometry kernel.

Both derive from ValueError so they read like any other model validation
failure. Outcomes such as "no intersection" or "cannot merge" are not
errors; they come back as result variants.
"""


class DomainError(ValueError):
    """A parameter was evaluated outside its normalized [0, 1] domain."""


class DegenerateInputError(ValueError):
    """Input geometry is too degenerate for the requested operation."""
