"""
Known / deferred wrappers for values that may only resolve at deploy time.

CDK represents such values as tokens. ``classify`` tags a raw value so that
callers check the tag before comparing or unwrapping it.
"""

from dataclasses import dataclass
from typing import Any, Union

from aws_cdk import Token


@dataclass(frozen=True)
class Known:
    value: Any


@dataclass(frozen=True)
class Deferred:
    token: Any


Value = Union[Known, Deferred]


def classify(value: Any) -> Value:
    if Token.is_unresolved(value):
        return Deferred(value)
    return Known(value)


def is_known(value: Value) -> bool:
    return isinstance(value, Known)


def is_known_region(value: Value, region: str) -> bool:
    """True only when ``value`` is concretely ``region``"""
    return isinstance(value, Known) and value.value == region
