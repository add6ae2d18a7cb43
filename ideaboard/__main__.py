"""Run the API with uvicorn: ``python -m ideaboard``."""

import uvicorn

from ideaboard.config import settings


def main():
    uvicorn.run(
        "ideaboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
