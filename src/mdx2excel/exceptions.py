"""Custom exceptions for the conversion pipeline."""


class Mdx2ExcelError(Exception):
    """Base exception for conversion errors."""


class ReadError(Mdx2ExcelError):
    """A document could not be opened or decoded."""


class ParseError(Mdx2ExcelError):
    """Front matter is present but is not a valid YAML mapping."""


class TraversalError(Mdx2ExcelError):
    """The source root is missing or cannot be listed."""


class EmptyResultError(Mdx2ExcelError):
    """No rows were produced, so there is nothing to write."""


class WriteError(Mdx2ExcelError):
    """The workbook or its output directory could not be written."""
