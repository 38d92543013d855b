"""
Exception hierarchy for newznab-client.

Fatal errors (transport, envelope decode, indexer error responses) propagate
to the caller unchanged. Per-attribute parse failures are handled inside the
normalizer and never surface as exceptions.
"""


class NewznabError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(NewznabError):
    """The transport collaborator failed to fetch a URL."""


class DecodeError(NewznabError):
    """An XML envelope was malformed or did not match the expected schema."""


class FormatError(NewznabError, ValueError):
    """A timestamp did not match the RFC1123Z wire format."""

    def __init__(self, value: str, reason: str = "does not match RFC1123Z"):
        self.value = value
        super().__init__(f"cannot parse {value!r} as RFC1123Z: {reason}")


class IndexerAPIError(NewznabError):
    """The indexer answered with a newznab ``<error>`` envelope."""

    def __init__(self, code: int, description: str):
        self.code = code
        self.description = description
        super().__init__(f"indexer error {code}: {description}")
