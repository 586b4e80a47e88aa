"""Exceptions raised by balancetree.

There is a single error kind: an invalid argument handed to an
operation. Missing keys and empty trees are ordinary outcomes reported
through return values, never through exceptions.
"""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument it cannot use."""


class InvalidVisitorError(InvalidArgumentError, TypeError):
    """Raised when a traversal is given a visitor that is not callable.

    The check happens before the first key is visited.
    """

    def __init__(self, visitor: object):
        self.visitor = visitor
        super().__init__(
            f"A callable visitor is required, got {type(visitor).__name__}"
        )
