"""CLI module for ontouml-to-alloy."""

from ontouml_to_alloy.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from ontouml_to_alloy.cli.exception_handler import handle_exceptions
from ontouml_to_alloy.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from ontouml_to_alloy.cli_main import app

__all__ = [
    "app",
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
