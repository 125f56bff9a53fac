"""FastAPI app entry for Convertaphile."""
from convertaphile.config import settings
from convertaphile.interfaces.api.app import app


def run() -> None:
    import uvicorn

    uvicorn.run(
        "convertaphile.interfaces.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
