import os
import tempfile

# Loggers are created at import time, keep their files out of the working tree
os.environ.setdefault('HEXAPOD_LOG_DIR', tempfile.mkdtemp(prefix='hexapod-logs-'))

import pytest  # noqa: E402

from hexapod.animation import Animator  # noqa: E402
from hexapod.configuration import HexapodParameters, ParametersProvider  # noqa: E402
from hexapod.kinematics import HexapodBody  # noqa: E402
from hexapod.messaging import EventBus  # noqa: E402
from hexapod.model import HexapodModel  # noqa: E402
from hexapod.models import Point, Pose  # noqa: E402

STANDING_ENDPOINTS = [Point(1.0, 0.0, 0.0) for _ in range(6)]


@pytest.fixture(autouse=True)
def isolated_parameters(tmp_path, monkeypatch):
    """Every test starts without a parameter file and with a fresh provider."""
    monkeypatch.setenv('HEXAPOD_CONFIG', str(tmp_path / 'missing.json'))
    ParametersProvider.reset()
    yield
    ParametersProvider.reset()


@pytest.fixture
def parameters():
    return HexapodParameters()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def body(parameters, event_bus):
    return HexapodBody(parameters, event_bus)


@pytest.fixture
def model(parameters, event_bus):
    model = HexapodModel(parameters)
    model.bind(event_bus)
    return model


@pytest.fixture
def standing_body(body, model):
    """Body committed at the default height with every foot at (1, 0, 0)."""
    assert body.update_body_ik(Pose(z=0.17), STANDING_ENDPOINTS)
    return body


@pytest.fixture
def animator(standing_body, model):
    return Animator(standing_body, model)
