import os

# widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest

from eigenshow.app.application import create_app
from eigenshow.model.matrices import MatrixSource
from eigenshow.model.session import Session


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One QApplication for the store's signals and the widget tests."""
    app = create_app(["eigenshow-tests"])
    yield app


@pytest.fixture
def session():
    return Session(source=MatrixSource(rng=np.random.default_rng(1234)))


@pytest.fixture
def identity_index():
    return MatrixSource().index_of("[1 0;0 1]")
