from logging import Logger
from typing import Iterator

import grpc
import pytest

from dapr_load_harness_test_support.fake_dapr_sidecar import FakeDaprSidecar


@pytest.fixture(scope='function')
def fake_dapr_sidecar(logger: Logger) -> Iterator[FakeDaprSidecar]:
    sidecar = FakeDaprSidecar(logger)
    sidecar.start()

    yield sidecar

    sidecar.stop()


@pytest.fixture(scope='function')
def channel(fake_dapr_sidecar: FakeDaprSidecar) -> Iterator[grpc.Channel]:
    with grpc.insecure_channel(fake_dapr_sidecar.address) as channel:
        yield channel
