# ABOUTME: Command-line entry point: `python -m weather_widget` serves the widget with uvicorn.
# ABOUTME: Configures logging from LOG_LEVEL and binds to WIDGET_HOST/WIDGET_PORT.

import logging

import uvicorn

from weather_widget import config


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("weather_widget.web:app", host=config.WIDGET_HOST, port=config.WIDGET_PORT)


if __name__ == "__main__":
    main()
