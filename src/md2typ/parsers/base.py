#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2typ/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that document parsers inherit
from. A parser turns source text into the md2typ AST.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2typ.ast import Document
from md2typ.exceptions import FileNotFoundError as Md2TypFileNotFoundError
from md2typ.exceptions import InvalidOptionsError
from md2typ.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts:
    - str: Document text
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw UTF-8 document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If parsing fails
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Input data to load. A str is taken to be the document text itself.

        Returns
        -------
        str
            Document text

        Raises
        ------
        FileNotFoundError
            If a Path input does not exist

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8-sig")
        if isinstance(input_data, Path):
            if not input_data.is_file():
                raise Md2TypFileNotFoundError(str(input_data))
            return input_data.read_text(encoding="utf-8-sig")

        data = input_data.read()
        if isinstance(data, bytes):
            return data.decode("utf-8-sig")
        return data
