from dapr_load_harness.domain.dapr_load_test_exception import DaprLoadTestException


class InvalidLoadTestOptionsException(DaprLoadTestException):
    pass
