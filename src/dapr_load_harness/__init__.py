from logging import Logger

import grpc

from dapr_load_harness.domain.call_context import CallContext
from dapr_load_harness.domain.dapr_load_test import DaprLoadTest
from dapr_load_harness.domain.load_test_options import LoadTestOptions
from dapr_load_harness.domain.parameter_parser import ParameterParser
from dapr_load_harness.domain.request_resolver import RequestResolver
from dapr_load_harness.infrastructure.grpc_remote_endpoint_factory import GrpcRemoteEndpointFactory
from dapr_load_harness.infrastructure.json_file_load_test_options import JsonFileLoadTestOptions

__all__ = ["dapr_load_test", "load_load_test_options", "CallContext", "DaprLoadTest", "LoadTestOptions",
           "ParameterParser", "RequestResolver"]


def dapr_load_test(options: LoadTestOptions, channel: grpc.Channel, logger: Logger) -> DaprLoadTest:
    load_test = DaprLoadTest(
        options,
        RequestResolver(GrpcRemoteEndpointFactory(channel, logger), logger),
        logger
    )

    load_test.prepare()

    return load_test


def load_load_test_options(options_file_path: str) -> LoadTestOptions:
    return JsonFileLoadTestOptions(options_file_path).load()
