"""Custom exceptions for tiptoc."""


class TiptocError(Exception):
    """Base exception for tiptoc operations."""


class ParseError(TiptocError):
    """Input is not a recognizable document structure."""


class FetchError(TiptocError):
    """Error while loading a document from a remote location."""
