"""FastAPI dependency injection for quoting services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from shadesails.application.commands import CalculateQuoteCommand


@lru_cache(maxsize=1)
def get_quote_command() -> CalculateQuoteCommand:
    """Get cached CalculateQuoteCommand instance."""
    return CalculateQuoteCommand()


QuoteCommandDep = Annotated[CalculateQuoteCommand, Depends(get_quote_command)]
