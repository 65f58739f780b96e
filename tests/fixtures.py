# type: ignore
import pytest

from unit_utils import Capture


@pytest.fixture
def with_output():
    yield Capture()
