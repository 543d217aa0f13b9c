from typing import TypeVar, Callable, cast, Any, Type
from unittest.mock import create_autospec

from dapr_load_harness_test_support.mocking.stub import Stub
from dapr_load_harness_test_support.mocking.verifiable_spy import VerifiableSpy

T = TypeVar("T")


# Callable[[], T] rather than Type[T] so that abstract ports can be mocked
# See https://github.com/python/mypy/issues/4717#issuecomment-2453711357
def mock_class(cls: Type[T] | Callable[[], T]) -> T:
    return cast(T, create_autospec(spec=cls, instance=True))


def verify(mock: Any) -> VerifiableSpy:
    return VerifiableSpy(mock)


def when_calling(mock: Any) -> Stub:
    return Stub(mock)
