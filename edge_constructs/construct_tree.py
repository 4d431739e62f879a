"""
Helpers for navigating the construct tree.

Application roots are recognised through ``Stage.is_stage``, which checks the
marker CDK places on every App and Stage, instead of Python type tests.
"""

from typing import Callable, Optional, TypeVar

from aws_cdk import Stage
from constructs import Construct, IConstruct

from cdk_logger import get_logger
from edge_constructs.errors import EdgeFunctionConfigurationError

logger = get_logger("ConstructTree")

T = TypeVar("T", bound=IConstruct)


def get_parent(node: IConstruct) -> Optional[IConstruct]:
    """Parent of ``node``, or None for the root of the tree"""
    return node.node.scope


def is_application_root(node: IConstruct) -> bool:
    return Stage.is_stage(node)


def find_application_root(node: IConstruct) -> Stage:
    """
    Return the App or Stage that ``node`` is deployed with.

    This is the closest enclosing App or Stage: stacks can only depend on
    stacks of the same stage.

    Raises:
        EdgeFunctionConfigurationError: if no App or Stage encloses ``node``.
    """
    current = get_parent(node)
    while current is not None:
        if is_application_root(current):
            return current
        current = get_parent(current)

    raise EdgeFunctionConfigurationError(
        "stacks which use EdgeFunctions must be part of a CDK app or stage"
    )


def find_child_by_name(parent: IConstruct, name: str) -> Optional[IConstruct]:
    return parent.node.try_find_child(name)


def get_or_create_child(
    parent: Construct, name: str, factory: Callable[[Construct, str], T]
) -> T:
    """
    Find the child ``name`` of ``parent`` or create it with ``factory``.

    The lookup and the creation happen in one step, so a given parent never
    ends up with two children built for the same name.
    """
    child = find_child_by_name(parent, name)
    if child is None:
        logger.debug(f"Creating {name} under {parent.node.path or '<root>'}")
        child = factory(parent, name)
    return child
