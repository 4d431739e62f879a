import aws_cdk as cdk
import pytest
from aws_cdk import aws_lambda as _lambda

from edge_constructs.edge_lambda import EdgeFunctionProps

ACCOUNT = "111111111111"

INLINE_HANDLER = """
def handler(event, context):
    return event["Records"][0]["cf"]["request"]
"""


def make_props(**overrides) -> EdgeFunctionProps:
    values = {
        "code": _lambda.Code.from_inline(INLINE_HANDLER),
        "handler": "index.handler",
        "runtime": _lambda.Runtime.PYTHON_3_12,
    }
    values.update(overrides)
    return EdgeFunctionProps(**values)


def edge_stacks(scope) -> list:
    return [
        child
        for child in scope.node.children
        if child.node.id.startswith("edge-lambda-stack-")
    ]


@pytest.fixture
def app():
    return cdk.App()


@pytest.fixture
def edge_props():
    return make_props()


@pytest.fixture
def us_east_1_stack(app):
    return cdk.Stack(
        app, "UsEast1Stack", env=cdk.Environment(account=ACCOUNT, region="us-east-1")
    )


@pytest.fixture
def eu_west_1_stack(app):
    return cdk.Stack(
        app, "EuWest1Stack", env=cdk.Environment(account=ACCOUNT, region="eu-west-1")
    )
