import logging

import structlog


def setup_logging(verbose: bool = False) -> None:
    """Route stdlib and structlog output through one level threshold."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))
