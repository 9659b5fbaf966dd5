"""Request/response helpers shared by the serverless handlers."""

import json

from contest.config import settings
from contest.logging_config import configure_logging

configure_logging(settings.log_level, settings.json_logs)

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class BadRequest(Exception):
    """The request cannot be handled as sent."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.status = status


def read_json_body(request) -> dict:
    """Return the decoded JSON body of a POST request.

    Raises:
        BadRequest: If the content type is not JSON or the body is not an object
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise BadRequest(f"Unsupported content type: {content_type}")

    try:
        data = json.loads(request.body.decode("utf-8"))
    except json.JSONDecodeError as e:
        raise BadRequest(f"Invalid JSON: {e}")
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def method_guard(request):
    """Return a response for preflight and non-POST requests, else None."""
    if request.method == "OPTIONS":
        return create_response("", status=204, headers=CORS_PREFLIGHT_HEADERS)
    if request.method != "POST":
        return create_response(
            {"error": "Method not allowed. Use POST."},
            status=405,
        )
    return None


def create_response(body, status: int = 200, headers: dict = None):
    """Create a response object for Vercel."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, (dict, list)):
        body = json.dumps(body)

    # Return in format expected by Vercel Python runtime
    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }
