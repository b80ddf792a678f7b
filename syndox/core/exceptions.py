"""Syndox custom exceptions."""


class SyndoxError(Exception):
    """Base exception for Syndox errors."""


class PatternResolutionError(SyndoxError):
    """A glob pattern could not be expanded."""


class FileSystemError(SyndoxError):
    """A tracked file could not be stat'ed or read."""


class ParseError(SyndoxError):
    """Error parsing a source file."""


class PersistenceError(SyndoxError):
    """The persisted document could not be read or written."""


class ConfigError(SyndoxError):
    """Configuration file or value is invalid."""


class PipelineError(SyndoxError):
    """Unexpected failure inside a pipeline stage."""
