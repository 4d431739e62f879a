"""
Cross-region SSM parameter reader.

SSM parameters can only be referenced from stacks in their own region. This
construct reads one through a custom resource instead, so the value becomes
available in the caller's stack at deployment time.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from aws_cdk import CustomResource, Duration, Stack
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from aws_cdk import custom_resources as cr
from constructs import Construct

from cdk_logger import get_logger
from config import READER_LAMBDA_PATH
from constants import ParameterReader
from edge_constructs.construct_tree import get_or_create_child

logger = get_logger("CrossRegionParameterReader")


@dataclass
class CrossRegionParameterReaderProviderProps:
    code_directory: str
    runtime: _lambda.Runtime
    policy_statements: List[iam.PolicyStatement] = field(default_factory=list)
    handler: str = "index.lambda_handler"
    timeout: Duration = field(
        default_factory=lambda: Duration.seconds(ParameterReader.TIMEOUT_SECONDS)
    )
    memory_size: int = ParameterReader.MEMORY_SIZE


class CrossRegionParameterReaderProvider(Construct):
    """Lambda-backed provider answering the reader custom resource."""

    def __init__(
        self,
        scope: Construct,
        id: str,
        props: CrossRegionParameterReaderProviderProps,
    ):
        super().__init__(scope, id)

        stack = Stack.of(self)
        powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            ParameterReader.powertools_layer_arn(stack.partition, stack.region),
        )

        self._handler = _lambda.Function(
            self,
            "Handler",
            runtime=props.runtime,
            handler=props.handler,
            code=_lambda.Code.from_asset(
                props.code_directory, exclude=["test_*.py", "__pycache__"]
            ),
            timeout=props.timeout,
            memory_size=props.memory_size,
            layers=[powertools_layer],
        )
        for statement in props.policy_statements:
            self._handler.add_to_role_policy(statement)

        self._provider = cr.Provider(
            self,
            "Provider",
            on_event_handler=self._handler,
        )

    @classmethod
    def get_or_create(
        cls,
        scope: Construct,
        resource_type: str,
        props: CrossRegionParameterReaderProviderProps,
    ) -> "CrossRegionParameterReaderProvider":
        """
        Return the provider for ``resource_type`` under ``scope``, creating it on
        first use. ``props`` are ignored when the provider already exists.
        """
        return get_or_create_child(
            scope,
            ParameterReader.provider_id(resource_type),
            lambda parent, name: cls(parent, name, props),
        )

    @property
    def service_token(self) -> str:
        return self._provider.service_token

    @property
    def handler(self) -> _lambda.IFunction:
        return self._handler


@dataclass
class CrossRegionStringParameterReaderProps:
    region: str
    parameter_name: str
    resource_type: str = ParameterReader.RESOURCE_TYPE
    runtime: Optional[_lambda.Runtime] = None


class CrossRegionStringParameterReader(Construct):
    """
    Reads an SSM string parameter from ``props.region`` at deployment time.

    The provider is shared per scope and resource type, and may only call
    ssm:GetParameter on the addressed parameter. A timestamp is sent with each
    deployment so the value is read again every time.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        props: CrossRegionStringParameterReaderProps,
        provider_scope: Optional[Construct] = None,
    ):
        super().__init__(scope, id)

        self._parameter_arn = Stack.of(self).format_arn(
            service="ssm",
            region=props.region,
            resource="parameter",
            resource_name=props.parameter_name,
        )

        provider = CrossRegionParameterReaderProvider.get_or_create(
            provider_scope or scope,
            props.resource_type,
            CrossRegionParameterReaderProviderProps(
                code_directory=READER_LAMBDA_PATH,
                runtime=props.runtime or _lambda.Runtime.PYTHON_3_12,
                policy_statements=[
                    iam.PolicyStatement(
                        actions=["ssm:GetParameter"],
                        resources=[self._parameter_arn],
                    )
                ],
            ),
        )

        self._resource = CustomResource(
            self,
            "Resource",
            resource_type=props.resource_type,
            service_token=provider.service_token,
            properties={
                "Region": props.region,
                "ParameterName": props.parameter_name,
                # Changes on every synth so the ARN is re-read on each deployment
                "RefreshEachDeploy": str(int(time.time() * 1000)),
            },
        )

        logger.debug(
            f"Reading parameter {props.parameter_name} from {props.region} "
            f"for {self.node.path}"
        )

    @property
    def parameter_arn(self) -> str:
        return self._parameter_arn

    @property
    def value(self) -> str:
        return self._resource.get_att_string(ParameterReader.RESULT_ATTRIBUTE)
