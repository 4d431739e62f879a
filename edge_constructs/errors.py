"""Exceptions raised while building Edge Functions."""


class EdgeFunctionError(Exception):
    pass


class EdgeFunctionConfigurationError(EdgeFunctionError, ValueError):
    """The surrounding app, stage or stack cannot host an Edge Function."""


class UnsupportedCapabilityError(EdgeFunctionError, NotImplementedError):
    """A Lambda function capability that Lambda@Edge does not allow."""
