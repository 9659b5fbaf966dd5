"""Vercel serverless function checking a score submission."""

import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add the project root to the path so we can import contest modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from api._http import BadRequest, create_response, method_guard, read_json_body  # noqa: E402

from contest.schemas import ValidateRequest  # noqa: E402
from contest.validation import scores_from_mapping, validate  # noqa: E402

logger = structlog.get_logger(__name__)


def handler(request):
    """Validate five category scores before they are stored.

    Accepts:
    - POST with JSON body: {"scores": {"category_1": 7.5, ..., "category_5": 10}}

    Returns {"ok": true}, or status 422 with the rejection reason
    (OutOfRange or InvalidGranularity) and the offending category.
    """
    early = method_guard(request)
    if early is not None:
        return early

    try:
        body = ValidateRequest.model_validate(read_json_body(request))
        result = validate(scores_from_mapping(body.scores))
        if not result.ok:
            return create_response(result.to_dict(), status=422)
        return create_response(result.to_dict())

    except BadRequest as e:
        return create_response({"error": str(e)}, status=e.status)
    except ValidationError as e:
        return create_response({"error": f"Invalid request: {e}"}, status=400)
    except KeyError as e:
        return create_response({"error": f"Missing score for {e.args[0]}"}, status=400)
    except Exception as e:
        logger.exception("validate_failed")
        return create_response({"error": f"Internal error: {e}"}, status=500)
