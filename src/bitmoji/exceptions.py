"""Errors raised while loading or reading the avatar catalog."""


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogLoadError(CatalogError):
    """Raised when a catalog document cannot be read, parsed or validated."""


class CatalogLookupError(CatalogError, KeyError):
    """Raised when a gender or style has no entry in the catalog."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""
