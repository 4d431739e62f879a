from typing import Any, Dict

SECURITY_HEADERS = {
    "strict-transport-security": "max-age=63072000; includeSubDomains; preload",
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "referrer-policy": "strict-origin-when-cross-origin",
}

HEADER_KEYS = {
    "strict-transport-security": "Strict-Transport-Security",
    "x-content-type-options": "X-Content-Type-Options",
    "x-frame-options": "X-Frame-Options",
    "referrer-policy": "Referrer-Policy",
}


def lambda_handler(event: Dict[str, Any], context) -> Dict[str, Any]:
    """
    CloudFront viewer-response handler adding security headers that the
    origin did not set.
    """
    response = event["Records"][0]["cf"]["response"]
    headers = response.setdefault("headers", {})

    for name, value in SECURITY_HEADERS.items():
        if name not in headers:
            headers[name] = [{"key": HEADER_KEYS[name], "value": value}]

    return response
