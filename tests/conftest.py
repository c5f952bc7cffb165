import logging

import colorlog
import pytest

from tests.fixtures.irc_fixtures import FakeTransport, healthy_replies, make_config


@pytest.fixture
def config():
    """Check configuration matching the healthy fixture server."""
    return make_config()


@pytest.fixture
def healthy_transport():
    """FakeTransport answering WHOIS and STATS u like a healthy server."""
    return FakeTransport(healthy_replies())


@pytest.fixture
def restore_root_logging():
    """Remove handlers installed by LoggerConfigurator and restore levels."""
    root = logging.getLogger()
    level = root.level
    asyncio_level = logging.getLogger("asyncio").level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, colorlog.ColoredFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("asyncio").setLevel(asyncio_level)
