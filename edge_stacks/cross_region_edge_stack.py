"""Support stack hosting Lambda@Edge functions for callers in other regions."""

from typing import List, Tuple

from aws_cdk import Stack
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_ssm as ssm
from cdk_nag import NagSuppressions
from constructs import Construct

from cdk_logger import get_logger
from constants import Edge
from edge_constructs.edge_lambda import EdgeFunctionProps, create_edge_lambda

logger = get_logger("CrossRegionEdgeStack")


class CrossRegionEdgeStack(Stack):
    """
    Stack that deploys Lambda@Edge functions to us-east-1.

    Lambda@Edge functions must be deployed in us-east-1 regardless of where
    the stacks using them are deployed. One instance is shared by every
    Edge Function of an app or stage that lives outside us-east-1; each
    function's version ARN is stored in an SSM parameter so that it can be
    read back from the caller's region.
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs):
        super().__init__(scope, construct_id, **kwargs)
        logger.info(f"Initializing CrossRegionEdgeStack with ID: {construct_id}")

        self._function_ids: List[str] = []

        NagSuppressions.add_stack_suppressions(
            self,
            [
                {
                    "id": "AwsSolutions-IAM4",
                    "reason": "Default edge role uses AWSLambdaBasicExecutionRole",
                }
            ],
        )

    @property
    def function_ids(self) -> List[str]:
        """Ids of the functions hosted by this stack"""
        return list(self._function_ids)

    def add_edge_function(
        self, construct_id: str, parameter_name: str, props: EdgeFunctionProps
    ) -> Tuple[_lambda.Function, _lambda.Version]:
        """
        Create a function in this stack and publish its version ARN.

        Repeated ids are not de-duplicated; each Edge Function calls this once.
        When creation fails, the children it added are removed again.
        """
        existing = {child.node.id for child in self.node.children}
        try:
            edge_function = create_edge_lambda(self, construct_id, construct_id, props)
            current_version = edge_function.current_version

            # Store version ARN in SSM parameter (in us-east-1)
            # This allows cross-region access from the caller's stack
            ssm.StringParameter(
                edge_function,
                Edge.PARAMETER_ID,
                parameter_name=parameter_name,
                string_value=current_version.edge_arn,
            )
        except Exception:
            for child_id in self._child_ids(construct_id):
                if child_id not in existing:
                    self.node.try_remove_child(child_id)
            raise

        self._function_ids.append(construct_id)
        logger.debug(
            f"Added edge function {construct_id} publishing to parameter {parameter_name}"
        )
        return edge_function, current_version

    def remove_edge_function(self, construct_id: str) -> None:
        """Remove a function added by ``add_edge_function`` and its default role."""
        for child_id in self._child_ids(construct_id):
            self.node.try_remove_child(child_id)
        if construct_id in self._function_ids:
            self._function_ids.remove(construct_id)
        logger.debug(f"Removed edge function {construct_id}")

    @staticmethod
    def _child_ids(construct_id: str) -> List[str]:
        return [construct_id, Edge.role_id(construct_id)]
