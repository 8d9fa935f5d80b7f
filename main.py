from loguru import logger

from naval_correspondence.cli import app


def main() -> None:
    logger.debug("naval-format starting")
    app()


if __name__ == "__main__":
    main()
