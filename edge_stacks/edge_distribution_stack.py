"""
Example stack serving a bucket through CloudFront with a Lambda@Edge
viewer-response handler.

The stack can be deployed to any region; the edge function itself is placed
in us-east-1 by ``EdgeFunction``.
"""

from dataclasses import dataclass
from pathlib import Path

from aws_cdk import CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_s3 as s3
from cdk_nag import NagSuppressions
from constructs import Construct

from cdk_logger import get_logger
from config import LAMBDA_BASE_PATH
from edge_constructs.edge_function import EdgeFunction
from edge_constructs.edge_lambda import EdgeFunctionProps

logger = get_logger("EdgeDistributionStack")


@dataclass
class EdgeDistributionStackProps:
    """Configuration for Edge Distribution Stack."""

    handler_directory: str = str(Path(LAMBDA_BASE_PATH) / "edge" / "security_headers")
    alias_name: str = "live"


class EdgeDistributionStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        props: EdgeDistributionStackProps,
        **kwargs,
    ):
        super().__init__(scope, construct_id, **kwargs)

        logger.info(
            f"Initializing EdgeDistributionStack with ID: {construct_id} in {self.region}"
        )

        self._bucket = s3.Bucket(
            self,
            "ContentBucket",
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )

        self._edge_function = EdgeFunction(
            self,
            "SecurityHeaders",
            EdgeFunctionProps(
                code=_lambda.Code.from_asset(props.handler_directory),
                handler="index.lambda_handler",
                runtime=_lambda.Runtime.PYTHON_3_12,
                memory_size=128,
                timeout=Duration.seconds(5),
                description="Adds security headers to CloudFront responses",
            ),
        )
        self._edge_function.add_alias(props.alias_name)

        self._distribution = cloudfront.Distribution(
            self,
            "Distribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3BucketOrigin.with_origin_access_control(self._bucket),
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
                edge_lambdas=[
                    cloudfront.EdgeLambda(
                        function_version=self._edge_function,
                        event_type=cloudfront.LambdaEdgeEventType.VIEWER_RESPONSE,
                    )
                ],
            ),
        )

        CfnOutput(
            self,
            "EdgeFunctionArn",
            value=self._edge_function.edge_arn,
            description="Lambda@Edge version ARN attached to the distribution",
        )
        CfnOutput(
            self,
            "DistributionDomainName",
            value=self._distribution.distribution_domain_name,
        )

        NagSuppressions.add_resource_suppressions(
            self._distribution,
            [
                {
                    "id": "AwsSolutions-CFR1",
                    "reason": "Example distribution has no geo restrictions",
                },
                {
                    "id": "AwsSolutions-CFR2",
                    "reason": "Example distribution is not fronted by WAF",
                },
                {
                    "id": "AwsSolutions-CFR3",
                    "reason": "Access logging is out of scope for the example",
                },
                {
                    "id": "AwsSolutions-CFR4",
                    "reason": "Default CloudFront certificate is used",
                },
            ],
        )
        NagSuppressions.add_resource_suppressions(
            self._bucket,
            [
                {
                    "id": "AwsSolutions-S1",
                    "reason": "Access logging is out of scope for the example",
                }
            ],
        )
        NagSuppressions.add_stack_suppressions(
            self,
            [
                {
                    "id": "AwsSolutions-IAM4",
                    "reason": "AWSLambdaBasicExecutionRole is the standard Lambda execution policy",
                },
                {
                    "id": "AwsSolutions-IAM5",
                    "reason": "Custom resource provider framework requires wildcard invoke on its handler",
                },
                {
                    "id": "AwsSolutions-L1",
                    "reason": "Provider framework runtime is managed by CDK",
                },
            ],
        )

    @property
    def edge_function(self) -> EdgeFunction:
        return self._edge_function

    @property
    def distribution(self) -> cloudfront.Distribution:
        return self._distribution
