"""Run the API server: ``python -m prreview``."""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "prreview.api:create_app",
        factory=True,
        host=os.environ.get("PRREVIEW_HOST", "0.0.0.0"),
        port=int(os.environ.get("PRREVIEW_PORT", "8080")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
