"""
Unit tests for the cross-region parameter reader custom resource handler
"""

import sys
from unittest.mock import MagicMock

# Mock AWS dependencies before importing index
sys.modules["boto3"] = MagicMock()
sys.modules["aws_lambda_powertools"] = MagicMock()
sys.modules["aws_lambda_powertools.utilities"] = MagicMock()
sys.modules["aws_lambda_powertools.utilities.typing"] = MagicMock()

import pytest
import index
from index import handle_event


def make_event(request_type, **extra):
    event = {
        "RequestType": request_type,
        "ResourceProperties": {
            "ServiceToken": "arn:aws:lambda:eu-west-1:111111111111:function:provider",
            "Region": "us-east-1",
            "ParameterName": "EdgeFunctionArnFn1",
            "RefreshEachDeploy": "1700000000000",
        },
    }
    event.update(extra)
    return event


@pytest.fixture
def ssm_client():
    client = MagicMock()
    client.get_parameter.return_value = {
        "Parameter": {
            "Name": "EdgeFunctionArnFn1",
            "Value": "arn:aws:lambda:us-east-1:111111111111:function:fn1:3",
        }
    }
    index.boto3.client.reset_mock()
    index.boto3.client.return_value = client
    return client


class TestHandleEvent:
    """Tests for handle_event"""

    def test_create_reads_parameter_in_requested_region(self, ssm_client):
        """Create should read the parameter with a client for the given region"""
        result = handle_event(make_event("Create"))

        index.boto3.client.assert_called_once_with("ssm", region_name="us-east-1")
        ssm_client.get_parameter.assert_called_once_with(Name="EdgeFunctionArnFn1")
        assert result == {
            "PhysicalResourceId": "EdgeFunctionArnFn1",
            "Data": {
                "FunctionArn": "arn:aws:lambda:us-east-1:111111111111:function:fn1:3"
            },
        }

    def test_update_reads_parameter_again(self, ssm_client):
        """Update should return the current value of the parameter"""
        result = handle_event(
            make_event("Update", PhysicalResourceId="EdgeFunctionArnFn1")
        )

        ssm_client.get_parameter.assert_called_once_with(Name="EdgeFunctionArnFn1")
        assert result["Data"]["FunctionArn"].endswith(":3")

    def test_delete_does_not_call_ssm(self, ssm_client):
        """Delete should keep the physical id and not touch SSM"""
        result = handle_event(make_event("Delete", PhysicalResourceId="existing-id"))

        ssm_client.get_parameter.assert_not_called()
        assert result == {"PhysicalResourceId": "existing-id"}

    def test_unknown_request_type_raises(self, ssm_client):
        """Unknown request types should fail the deployment"""
        with pytest.raises(ValueError):
            handle_event(make_event("Rollback"))

    def test_ssm_errors_propagate(self, ssm_client):
        """SSM failures should not be swallowed"""
        ssm_client.get_parameter.side_effect = RuntimeError("ParameterNotFound")

        with pytest.raises(RuntimeError):
            handle_event(make_event("Create"))
