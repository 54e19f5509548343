import pytest

from tests.fakes import ConfirmingNode, FakeAlgodClient


@pytest.fixture
def algod_client():
    return FakeAlgodClient()


@pytest.fixture
def node():
    return ConfirmingNode()
