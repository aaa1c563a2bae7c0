import logging

import uvicorn

from . import config


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Vehicle Service listening on http://%s:%s", config.HOST, config.PORT)
    uvicorn.run("vehicle_api.app.main:app", host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
