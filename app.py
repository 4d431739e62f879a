#!/usr/bin/env python3
"""Entry point for the Edge Function example CDK application."""
import os

import aws_cdk as cdk
from cdk_nag import AwsSolutionsChecks

from cdk_logger import CDKLogger, get_logger
from config import config
from constants import DEFAULT_TAGS
from edge_stacks.edge_distribution_stack import (
    EdgeDistributionStack,
    EdgeDistributionStackProps,
)

# Initialize global logger configuration
CDKLogger.set_level(config.logging.level)

# Create application-level logger
logger = get_logger("CDKApp")
logger.info(f"Initializing edge function CDK app with log level: {config.logging.level}")

app = cdk.App()

# EdgeFunction needs an explicit region on the stack using it
env = cdk.Environment(
    account=os.environ.get("CDK_DEFAULT_ACCOUNT", config.account_id),
    region=os.environ.get("CDK_DEFAULT_REGION", config.primary_region),
)

distribution_stack = EdgeDistributionStack(
    app,
    f"{config.resource_prefix}-distribution-{config.environment}",
    props=EdgeDistributionStackProps(),
    env=env,
)

for key, value in {**DEFAULT_TAGS, **config.tags}.items():
    cdk.Tags.of(app).add(key, value)
if config.resource_application_tag:
    cdk.Tags.of(app).add("Application", config.resource_application_tag)

# AWS Solutions checks
cdk.Aspects.of(app).add(AwsSolutionsChecks(verbose=True))

app.synth()
