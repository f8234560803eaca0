"""Run the API server with uvicorn.

Usage:
    python -m clusterauthz
    clusterauthz            # console script
"""

import uvicorn

from clusterauthz.core.config import settings


def main() -> None:
    """Serve clusterauthz.main:app on the configured host and port."""
    uvicorn.run(
        "clusterauthz.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
