"""
Placement of the Lambda function behind an Edge Function.

A function requested from a us-east-1 stack is created in place. From any
other region it is created in a shared support stack in us-east-1, and its
version ARN is read back through SSM and a cross-region custom resource.
"""

from dataclasses import dataclass

from aws_cdk import Environment, Stack
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

from cdk_logger import get_logger
from constants import Edge
from edge_constructs.construct_tree import (
    find_application_root,
    get_or_create_child,
    get_parent,
)
from edge_constructs.cross_region_parameter_reader import (
    CrossRegionStringParameterReader,
    CrossRegionStringParameterReaderProps,
)
from edge_constructs.deferred import Value, classify, is_known, is_known_region
from edge_constructs.edge_lambda import EdgeFunctionProps, create_edge_lambda
from edge_constructs.errors import EdgeFunctionConfigurationError
from edge_stacks.cross_region_edge_stack import CrossRegionEdgeStack

logger = get_logger("EdgePlacement")


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of placing an Edge Function's backing Lambda function."""

    edge_function: _lambda.IFunction
    current_version: _lambda.IVersion
    edge_arn: str
    # Stack owning the function; aliases must be created there
    function_stack: Stack


def resolve_placement(
    scope: Construct, construct_id: str, props: EdgeFunctionProps
) -> PlacementResult:
    region = classify(Stack.of(scope).region)

    if is_known_region(region, Edge.REGION):
        logger.info(f"Creating edge function {construct_id} in-region")
        return _place_in_region(scope, construct_id, props)

    logger.info(
        f"Creating edge function {construct_id} in {Edge.REGION} "
        f"for stack {Stack.of(scope).stack_name}"
    )
    return _place_cross_region(scope, construct_id, props, region)


def _place_in_region(
    scope: Construct, construct_id: str, props: EdgeFunctionProps
) -> PlacementResult:
    edge_function = create_edge_lambda(
        scope, Edge.IN_REGION_FUNCTION_ID, construct_id, props
    )
    current_version = edge_function.current_version

    return PlacementResult(
        edge_function=edge_function,
        current_version=current_version,
        edge_arn=current_version.edge_arn,
        function_stack=Stack.of(scope),
    )


def _place_cross_region(
    scope: Construct, construct_id: str, props: EdgeFunctionProps, region: Value
) -> PlacementResult:
    parameter_name = Edge.parameter_name(construct_id)

    function_stack = edge_stack_for(scope, region)

    try:
        edge_function, current_version = function_stack.add_edge_function(
            construct_id, parameter_name, props
        )
        try:
            reader = CrossRegionStringParameterReader(
                scope,
                Edge.ARN_READER_ID,
                CrossRegionStringParameterReaderProps(
                    region=Edge.REGION,
                    parameter_name=parameter_name,
                ),
            )
        except Exception:
            function_stack.remove_edge_function(construct_id)
            raise
    except Exception:
        # A support stack left without functions was created by this call
        if not function_stack.function_ids:
            get_parent(function_stack).node.try_remove_child(function_stack.node.id)
        raise

    # Only record the dependency once everything else is in place
    Stack.of(scope).add_dependency(function_stack)

    return PlacementResult(
        edge_function=edge_function,
        current_version=current_version,
        edge_arn=reader.value,
        function_stack=function_stack,
    )


def edge_stack_for(scope: Construct, region: Value) -> CrossRegionEdgeStack:
    """
    Find or create the us-east-1 support stack of the app or stage of ``scope``.

    The stack is created directly under the app or stage, and its id depends
    only on the region it deploys to, so every caller shares one instance.

    Raises:
        EdgeFunctionConfigurationError: if ``scope`` is not inside an app or
            stage, or ``region`` is not known at synthesis time.
    """
    stage = find_application_root(scope)

    if not is_known(region):
        raise EdgeFunctionConfigurationError(
            "stacks which use EdgeFunctions must have an explicitly set region"
        )

    account = classify(Stack.of(scope).account)
    env = Environment(
        region=Edge.REGION,
        account=account.value if is_known(account) else None,
    )

    return get_or_create_child(
        stage,
        Edge.stack_id(Edge.REGION),
        lambda parent, name: CrossRegionEdgeStack(parent, name, env=env),
    )
