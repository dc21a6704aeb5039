"""Validates TV settings with chained guards.

Run with ``python examples/tv_settings.py``.
"""

import logging

from fluent_guards import Bound, Guard, GuardFailedError


logger = logging.getLogger(__name__)


def set_tv(channel: int, volume: float) -> None:
    channel = (
        Guard(channel)
        .between(1, 15, Bound.INCLUSIVE, "Invalid channel!")
        .not_equal_to(13, "Channel 13 is blocked!")  # Block channel 13
        .finalize()
        .unwrap()
    )

    volume = (
        Guard(volume)
        .not_equal_to(0.0, "TV does not support mute!")
        .greater_or_equal(0.1, "Volume must be more than 10%!")
        .less_or_equal(1.0, "Volume cannot be more than 100%!")
        .finalize()
        .unwrap()
    )

    logger.info("Setting TV to channel %d and volume to %.0f%%", channel, volume * 100)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    for channel, volume in [(5, 0.5), (2, 0.7), (0, 0.5), (13, 0.5), (7, 0.0), (7, 0.05), (7, 1.1)]:
        try:
            set_tv(channel, volume)
        except GuardFailedError as exc:
            logger.warning("Rejected channel=%s volume=%s: %s", channel, volume, exc)


if __name__ == "__main__":
    main()
