"""Helpers shared by the unit tests: canned envelopes and a fake executor."""

import json

ENDPOINT = "metrics.example.com"
TOKEN = "0123-4567-89ab-cdef"
API = f"https://{ENDPOINT}/api/v2"


def envelope(response, code=200, result="OK", message=""):
    """Wrap *response* the way the Wavefront API does."""
    return json.dumps(
        {
            "status": {"result": result, "message": message, "code": code},
            "response": response,
        }
    )


def page(items, offset=0, limit=None, more=False, cursor=None, total=None):
    """A collection page, as found in an envelope's ``response``."""
    body = {
        "items": items,
        "offset": offset,
        "limit": len(items) if limit is None else limit,
        "totalItems": total if total is not None else len(items),
        "moreItems": more,
    }
    if cursor is not None:
        body["cursor"] = cursor
    return body


class FakeExecutor:
    """Executor that replays canned ``(body, code)`` answers and records calls.

    An answer may be a tuple, a JSON-serializable page envelope, or an
    exception instance to raise.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []

    def execute(self, method, path, payload=None, content_type=None):
        self.calls.append(
            {
                "method": method,
                "path": path,
                "payload": payload,
                "content_type": content_type,
            }
        )
        answer = self.answers[len(self.calls) - 1]
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, tuple):
            return answer
        return answer, 200


