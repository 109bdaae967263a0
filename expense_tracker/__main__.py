"""Run the API with uvicorn: python -m expense_tracker"""

import uvicorn

from expense_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "expense_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
