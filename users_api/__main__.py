"""
Run the Users Registration API with uvicorn.

Usage: python -m users_api [port]
"""
# Standard library imports
import sys
from typing import List, Optional

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .core.logging_config import configure_logging
from .main import app


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    port = int(argv[0]) if argv else settings.port

    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
