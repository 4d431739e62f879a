"""
Custom resource handler reading an SSM parameter from another region.

Used by Edge Functions to fetch the version ARN published in us-east-1.
Resource properties:
    Region: region holding the parameter
    ParameterName: name of the parameter
    RefreshEachDeploy: changes on every deployment, forces a new read
"""

from typing import Any, Dict

import boto3
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

logger = Logger()

RESULT_ATTRIBUTE = "FunctionArn"


def read_parameter(region: str, parameter_name: str) -> str:
    ssm = boto3.client("ssm", region_name=region)
    response = ssm.get_parameter(Name=parameter_name)
    return response["Parameter"]["Value"]


def handle_event(event: Dict[str, Any]) -> Dict[str, Any]:
    request_type = event["RequestType"]
    props = event["ResourceProperties"]
    region = props["Region"]
    parameter_name = props["ParameterName"]

    if request_type == "Delete":
        # Nothing was created, so there is nothing to clean up
        logger.info(f"Delete requested for {parameter_name}, nothing to do")
        return {"PhysicalResourceId": event.get("PhysicalResourceId", parameter_name)}

    if request_type not in ("Create", "Update"):
        raise ValueError(f"Unsupported request type: {request_type}")

    logger.info(f"Reading parameter {parameter_name} from {region}")
    value = read_parameter(region, parameter_name)
    logger.debug(f"Parameter {parameter_name} resolved to {value}")

    return {
        "PhysicalResourceId": parameter_name,
        "Data": {RESULT_ATTRIBUTE: value},
    }


@logger.inject_lambda_context
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handle_event(event)
