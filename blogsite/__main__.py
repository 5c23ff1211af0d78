"""Module to run app in console."""
import os
from typing import Dict

import uvicorn

from blogsite.config import settings
from blogsite.core.constants import AppEnvironment

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def listen_url_to_config(listen: str) -> Dict:
    """Convert listen url string into uvicorn config."""
    input_val = listen or ""
    schema, _, listen_value = input_val.partition("://")

    if schema == "unix":  # noqa: R505
        if os.path.exists(listen_value):
            os.remove(listen_value)
        return {"uds": listen_value}
    elif schema == "http":
        host, _, port = listen_value.partition(":")
        return {
            "host": host or DEFAULT_HOST,
            "port": int(port or DEFAULT_PORT),
        }
    return {"host": DEFAULT_HOST, "port": DEFAULT_PORT}


def main() -> None:
    """Launch blog."""
    params = listen_url_to_config(settings.GS_LISTEN)
    params["reload"] = settings.GS_ENVIRONMENT in (
        AppEnvironment.DEVELOPMENT.value,
        AppEnvironment.TEST.value,
    )
    uvicorn.run("blogsite.app:application", **params)


if __name__ == "__main__":
    main()
