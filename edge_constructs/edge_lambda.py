from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aws_cdk import Duration
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from cdk_logger import get_logger
from constants import Edge

logger = get_logger("EdgeLambda")


@dataclass
class EdgeFunctionProps:
    """Configuration for an Edge Function.

    ``function_options`` is passed through to ``aws_lambda.Function`` for any
    setting not listed here.
    """

    code: _lambda.Code
    handler: str
    runtime: _lambda.Runtime
    role: Optional[iam.IRole] = None
    description: Optional[str] = None
    memory_size: Optional[int] = None
    timeout: Optional[Duration] = None
    function_options: Dict[str, Any] = field(default_factory=dict)


def default_edge_role(scope: Construct, construct_id: str) -> iam.IRole:
    """Role assumable by both Lambda and Lambda@Edge with basic execution rights."""
    return iam.Role(
        scope,
        Edge.role_id(construct_id),
        assumed_by=iam.CompositePrincipal(
            iam.ServicePrincipal(Edge.LAMBDA_SERVICE_PRINCIPAL),
            iam.ServicePrincipal(Edge.EDGE_LAMBDA_SERVICE_PRINCIPAL),
        ),
        managed_policies=[
            iam.ManagedPolicy.from_aws_managed_policy_name(Edge.BASIC_EXECUTION_POLICY)
        ],
    )


def create_edge_lambda(
    scope: Construct, function_id: str, construct_id: str, props: EdgeFunctionProps
) -> _lambda.Function:
    """
    Create the Lambda function backing an Edge Function under ``scope``.

    The caller's role is used as given; without one a default role is created
    next to the function.
    """
    role = props.role
    if role is None:
        logger.debug(f"No role supplied for {construct_id}, creating default edge role")
        role = default_edge_role(scope, construct_id)

    return _lambda.Function(
        scope,
        function_id,
        code=props.code,
        handler=props.handler,
        runtime=props.runtime,
        role=role,
        description=props.description,
        memory_size=props.memory_size,
        timeout=props.timeout,
        **props.function_options,
    )
