"""Vercel serverless function returning the contest leaderboard."""

import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add the project root to the path so we can import contest modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from api._http import BadRequest, create_response, method_guard, read_json_body  # noqa: E402

from contest.leaderboard import LeaderboardError, build_all_leaderboards, build_leaderboard  # noqa: E402
from contest.models import DuplicateVoteError, UnknownEntryError, UnknownUserError  # noqa: E402
from contest.schemas import LeaderboardRequest  # noqa: E402

logger = structlog.get_logger(__name__)


def handler(request):
    """Rank a contest snapshot for a viewer.

    Accepts:
    - POST with JSON body: {"viewer": {"is_admin": bool}, "users": [...],
      "entries": [...], "votes": [...], "metric": "overall", "view": "average"}
      Set "all_metrics": true to get one ranking per metric.

    Returns JSON with the ranked entries, redacted for non-admin viewers.
    """
    early = method_guard(request)
    if early is not None:
        return early

    try:
        body = LeaderboardRequest.model_validate(read_json_body(request))
        users, entries, votes = body.to_records()
        viewer = body.viewer.to_viewer()

        if body.all_metrics:
            results = build_all_leaderboards(entries, users, votes, viewer, view=body.view)
            return create_response({"leaderboards": [r.to_dict() for r in results]})

        result = build_leaderboard(
            entries, users, votes, viewer, metric=body.metric, view=body.view
        )
        return create_response(result.to_dict())

    except BadRequest as e:
        return create_response({"error": str(e)}, status=e.status)
    except ValidationError as e:
        return create_response({"error": f"Invalid snapshot: {e}"}, status=400)
    except LeaderboardError as e:
        return create_response({"error": str(e)}, status=400)
    except DuplicateVoteError as e:
        return create_response({"error": str(e)}, status=400)
    except (UnknownEntryError, UnknownUserError) as e:
        return create_response({"error": str(e)}, status=404)
    except Exception as e:
        logger.exception("leaderboard_failed")
        return create_response({"error": f"Internal error: {e}"}, status=500)
