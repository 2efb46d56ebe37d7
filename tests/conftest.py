import io

import pytest

from argus.config.model import ConnectionConfig
from argus.output import ConsoleSink


@pytest.fixture
def config():
    """Valid, quiet connection configuration."""
    return ConnectionConfig(
        nick="viewerbot",
        oauth_token="abcdefghijklmnopqrstuvwxyz0123",
        client_id="clientid0123456789",
        channel="#somechannel",
        channel_id="12826",
        show_logs=False,
    )


@pytest.fixture
def verbose_config(config):
    return config.model_copy(update={"show_logs": True})


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def sink(stream):
    """ConsoleSink writing into an in-memory buffer."""
    return ConsoleSink(stream)


@pytest.fixture
def output_lines(stream):
    """Return a callable giving the lines written to the sink so far."""

    def _lines():
        return stream.getvalue().splitlines()

    return _lines
