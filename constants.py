#!/usr/bin/env python3
"""
Constants used throughout the Edge Function CDK application.
This file contains named constants to ensure consistency across stacks and constructs.
"""

from typing import Dict

from config import config

# General constants
APP_NAME = "edge-function"

# Default tags to apply to all resources
DEFAULT_TAGS: Dict[str, str] = {
    "Project": APP_NAME,
    "ManagedBy": "CDK",
}


class Edge:
    """Lambda@Edge related constants"""

    # Lambda@Edge functions can only be created in this region
    REGION = "us-east-1"

    LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"
    EDGE_LAMBDA_SERVICE_PRINCIPAL = "edgelambda.amazonaws.com"
    BASIC_EXECUTION_POLICY = "service-role/AWSLambdaBasicExecutionRole"

    # Construct ids
    IN_REGION_FUNCTION_ID = "Fn"
    ARN_READER_ID = "ArnReader"
    PARAMETER_ID = "Parameter"

    @staticmethod
    def stack_id(region: str) -> str:
        """Id of the support stack hosting functions for ``region``"""
        return f"edge-lambda-stack-{region}"

    @staticmethod
    def parameter_name(construct_id: str) -> str:
        """SSM parameter holding the version ARN of the function ``construct_id``"""
        return f"EdgeFunctionArn{construct_id}"

    @staticmethod
    def role_id(construct_id: str) -> str:
        return f"{construct_id}ServiceRole"

    @staticmethod
    def alias_id(alias_name: str) -> str:
        return f"Alias{alias_name}"


class ParameterReader:
    """Cross-region SSM parameter reader custom resource constants"""

    RESOURCE_TYPE = "Custom::CrossRegionStringParameterReader"
    RESULT_ATTRIBUTE = "FunctionArn"

    TIMEOUT_SECONDS = config.edge.reader_timeout_seconds
    MEMORY_SIZE = config.edge.reader_memory_size

    # Public AWS Lambda Powertools layer, published per region
    POWERTOOLS_LAYER_ACCOUNT = "017000801446"
    POWERTOOLS_LAYER_NAME = "AWSLambdaPowertoolsPythonV3-python312-x86_64"

    @staticmethod
    def powertools_layer_arn(partition: str, region: str) -> str:
        return (
            f"arn:{partition}:lambda:{region}:{ParameterReader.POWERTOOLS_LAYER_ACCOUNT}"
            f":layer:{ParameterReader.POWERTOOLS_LAYER_NAME}"
            f":{config.edge.powertools_layer_version}"
        )

    @staticmethod
    def provider_id(resource_type: str) -> str:
        """Construct id of the provider registered for ``resource_type``"""
        return f"{resource_type.replace('Custom::', '')}Provider"
