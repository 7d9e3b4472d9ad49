from __future__ import annotations

import importlib
import logging
from typing import Iterable

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .interns.model import Intern
from .logsink.sink import LogSinkHandler

logger = logging.getLogger(__name__)


def bootstrap(interns: Iterable[Intern] = ()) -> Container:
    """Load settings, configure logging and open the shared log sink.

    Call ``shutdown`` with the returned container before exiting so pending
    log lines are flushed.
    """
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(settings=settings, interns=interns)
    container.log_sink.open()
    if getattr(settings, "LOG_TO_FILE", False):
        logging.getLogger().addHandler(LogSinkHandler(container.log_sink))

    logger.debug("settings=%s log_file=%s", settings_module, container.log_sink.path)
    return container


def shutdown(container: Container) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, LogSinkHandler):
            root.removeHandler(handler)
    container.log_sink.close()
