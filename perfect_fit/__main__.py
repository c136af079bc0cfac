import uvicorn
import structlog

from .config import settings


logger = structlog.get_logger("perfect_fit")


def main() -> None:
    logger.info("server_starting",
               host=settings.host,
               port=settings.port,
               environment=settings.environment,
               static_dir=settings.static_dir)
    uvicorn.run("perfect_fit.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
