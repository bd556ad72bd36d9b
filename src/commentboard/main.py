"""Main entry point for FastAPI server."""

import uvicorn

from commentboard.config.settings import Settings


def main(host: str = None, port: int = None, reload: bool = None):
    """Start the FastAPI server.

    Runs a single worker: the tag cache lives in process memory, so extra
    workers would not see each other's invalidations.
    """
    uvicorn.run(
        "commentboard.api.endpoints:app",
        host=host or Settings.API_HOST,
        port=port or Settings.API_PORT,
        reload=Settings.API_RELOAD if reload is None else reload,
        workers=1,
        log_level="debug" if Settings.DEBUG else "info"
    )


if __name__ == "__main__":
    main()
