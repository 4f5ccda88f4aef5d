"""
Run the API server:
  python -m storefront
Host and port come from HOST / PORT (see storefront.core.config).
"""

import uvicorn

from storefront.core.config import get_settings
from storefront.core.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
