from __future__ import annotations


class MalformedAutomatonError(ValueError):
    """Raised while building a graph whose edges or states are not well formed."""
