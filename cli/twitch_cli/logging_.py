from __future__ import annotations

import logging

_NOISY = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # the client logs one DEBUG line per request; httpx repeats it at INFO
    logging.getLogger("twitch_client").setLevel(level)
    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)
