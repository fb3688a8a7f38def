"""Exceptions raised by traversal-builder.

Only configuration problems are reported through these classes. Errors
raised by user callbacks, predicates or adapters during a walk propagate
to the caller of ``Traversal.traverse`` exactly as they were raised.
"""

from typing import List, Optional


class TraversalBuilderError(Exception):
    """Base class for all errors raised by traversal-builder itself."""
    pass


class ConfigurationError(TraversalBuilderError, ValueError):
    """Raised by ``TraversalBuilder.build()`` when the configuration is invalid.

    Attributes:
        reasons: The individual validation problems, in the order they
            were detected.
    """

    def __init__(self, reasons: List[str], message: Optional[str] = None):
        self.reasons = list(reasons)
        super().__init__(message or "; ".join(self.reasons))
