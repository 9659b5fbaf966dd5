"""Vercel serverless function reporting who has voted on an entry."""

import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add the project root to the path so we can import contest modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from api._http import BadRequest, create_response, method_guard, read_json_body  # noqa: E402

from contest.leaderboard import completion_report  # noqa: E402
from contest.models import UnknownEntryError  # noqa: E402
from contest.schemas import CompletionRequest  # noqa: E402

logger = structlog.get_logger(__name__)


def handler(request):
    """Report voting completion for one entry.

    Accepts:
    - POST with JSON body: {"entry_id": "...", "users": [...],
      "entries": [...], "votes": [...]}

    Returns JSON with the voted and pending usernames. Administrators are
    never listed.
    """
    early = method_guard(request)
    if early is not None:
        return early

    try:
        body = CompletionRequest.model_validate(read_json_body(request))
        users, entries, votes = body.to_records()
        report = completion_report(body.entry_id, entries, users, votes)
        return create_response(report.to_dict())

    except BadRequest as e:
        return create_response({"error": str(e)}, status=e.status)
    except ValidationError as e:
        return create_response({"error": f"Invalid snapshot: {e}"}, status=400)
    except UnknownEntryError as e:
        return create_response({"error": str(e)}, status=404)
    except Exception as e:
        logger.exception("completion_failed")
        return create_response({"error": f"Internal error: {e}"}, status=500)
