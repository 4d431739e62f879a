"""
Lambda@Edge function usable from a stack in any region.

Lambda@Edge functions must live in us-east-1. ``EdgeFunction`` creates the
function there, directly when its stack is already in us-east-1 and through
a shared support stack otherwise, and then behaves like a local function
version: every call is forwarded to the real function.
"""

from typing import List, Optional

import jsii
from aws_cdk import Fn, Resource, Stack
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct, Node

from cdk_logger import get_logger
from constants import Edge
from edge_constructs.edge_lambda import EdgeFunctionProps
from edge_constructs.edge_placement import resolve_placement
from edge_constructs.errors import UnsupportedCapabilityError

logger = get_logger("EdgeFunction")


@jsii.implements(_lambda.IVersion)
class EdgeFunction(Resource):
    """
    A Lambda@Edge function.

    Convenience resource for requesting a Lambda function in the 'us-east-1'
    region for use with Lambda@Edge. Implements several restrictions enforced
    by Lambda@Edge.
    """

    EDGE_REGION = Edge.REGION

    def __init__(self, scope: Construct, id: str, props: EdgeFunctionProps):
        super().__init__(scope, id)

        try:
            placement = resolve_placement(self, id, props)
            # Version ARNs end in ":<qualifier>", the 8th field
            version = Fn.select(7, Fn.split(":", placement.edge_arn))
        except Exception as e:
            logger.error(f"Failed to create edge function {id}: {str(e)}")
            # Leave no half-built facade in the tree
            scope.node.try_remove_child(id)
            raise

        # function_stack and current_version are needed for add_alias
        self._function_stack = placement.function_stack
        self._current_version = placement.current_version
        self._lambda = placement.edge_function
        self._edge_arn = placement.edge_arn
        self._version = version

    @property
    def edge_arn(self) -> str:
        return self._edge_arn

    @property
    def function_arn(self) -> str:
        return self._edge_arn

    @property
    def function_name(self) -> str:
        return self._lambda.function_name

    @property
    def version(self) -> str:
        return self._version

    @property
    def lambda_(self) -> _lambda.IFunction:
        return self._lambda

    @property
    def current_version(self) -> _lambda.IVersion:
        return self._current_version

    @property
    def function_stack(self) -> Stack:
        """Stack that holds the underlying function and its aliases."""
        return self._function_stack

    @property
    def grant_principal(self) -> iam.IPrincipal:
        return self._lambda.role

    @property
    def role(self) -> Optional[iam.IRole]:
        return self._lambda.role

    @property
    def permissions_node(self) -> Node:
        return self._lambda.permissions_node

    @property
    def architecture(self) -> _lambda.Architecture:
        return self._lambda.architecture

    @property
    def is_bound_to_vpc(self) -> bool:
        return False

    @property
    def resource_arns_for_grant_invoke(self) -> List[str]:
        return [self._edge_arn]

    @property
    def connections(self) -> ec2.Connections:
        """Not supported. Connections are only applicable to VPC-enabled functions."""
        raise UnsupportedCapabilityError("Lambda@Edge does not support connections")

    @property
    def latest_version(self) -> _lambda.IVersion:
        raise UnsupportedCapabilityError(
            "$LATEST function version cannot be used for Lambda@Edge"
        )

    def add_alias(self, alias_name: str, **options) -> _lambda.Alias:
        # Aliases live next to the function, which may be in the support stack
        return _lambda.Alias(
            self._function_stack,
            Edge.alias_id(alias_name),
            alias_name=alias_name,
            version=self._current_version,
            **options,
        )

    def add_event_source_mapping(
        self, id: str, **options
    ) -> _lambda.EventSourceMapping:
        return self._lambda.add_event_source_mapping(id, **options)

    def add_permission(self, id: str, **permission) -> None:
        return self._lambda.add_permission(id, **permission)

    def add_to_role_policy(self, statement: iam.PolicyStatement) -> None:
        return self._lambda.add_to_role_policy(statement)

    def grant_invoke(self, grantee: iam.IGrantable) -> iam.Grant:
        return self._lambda.grant_invoke(grantee)

    def grant_invoke_url(self, grantee: iam.IGrantable) -> iam.Grant:
        return self._lambda.grant_invoke_url(grantee)

    def grant_invoke_composite_principal(
        self, composite_principal: iam.CompositePrincipal
    ) -> List[iam.Grant]:
        return self._lambda.grant_invoke_composite_principal(composite_principal)

    def grant_invoke_version(
        self, grantee: iam.IGrantable, version: _lambda.IVersion
    ) -> iam.Grant:
        return self._lambda.grant_invoke_version(grantee, version)

    def grant_invoke_latest_version(self, grantee: iam.IGrantable) -> iam.Grant:
        raise UnsupportedCapabilityError(
            "$LATEST function version cannot be used for Lambda@Edge"
        )

    def metric(self, metric_name: str, **props) -> cloudwatch.Metric:
        return self._lambda.metric(metric_name, **{**props, "region": self.EDGE_REGION})

    def metric_duration(self, **props) -> cloudwatch.Metric:
        return self._lambda.metric_duration(**{**props, "region": self.EDGE_REGION})

    def metric_errors(self, **props) -> cloudwatch.Metric:
        return self._lambda.metric_errors(**{**props, "region": self.EDGE_REGION})

    def metric_invocations(self, **props) -> cloudwatch.Metric:
        return self._lambda.metric_invocations(**{**props, "region": self.EDGE_REGION})

    def metric_throttles(self, **props) -> cloudwatch.Metric:
        return self._lambda.metric_throttles(**{**props, "region": self.EDGE_REGION})

    def add_event_source(self, source: _lambda.IEventSource) -> None:
        return self._lambda.add_event_source(source)

    def configure_async_invoke(self, **options) -> None:
        return self._lambda.configure_async_invoke(**options)
