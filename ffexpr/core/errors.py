"""Exceptions raised while configuring filter builders."""


class FFExprError(Exception):
    """Base class for all ffexpr errors."""


class InvalidArgument(FFExprError, ValueError):
    """An option value is out of range, missing, or not a legal choice."""


class FileNotFound(InvalidArgument, FileNotFoundError):
    """A file referenced by a filter option does not exist."""
