import logging

import httpx
from notion_client import APIErrorCode, APIResponseError
from notion_client.errors import HTTPResponseError, RequestTimeoutError

from errors import UpstreamOther, UpstreamTargetNotFound, UpstreamUnauthorized

logger = logging.getLogger(__name__)

# ─── Form field → Notion property ─────────────────────────────────────────
# (form field, Submission attribute, default property name, property kind)
PROPERTY_MAP = (
    ("firstName", "first_name", "First name", "title"),
    ("lastName", "last_name", "Last name", "rich_text"),
    ("email", "email", "Email", "email"),
    ("gpuType", "gpu_type", "GPU type", "select"),
    ("quantity", "quantity", "Quantity", "number"),
    ("message", "message", "Message", "rich_text"),
    ("submissionTime", "submitted_at", "Submission time", "date"),
)

DEFAULT_PROPERTY_NAMES = {field: name for field, _, name, _ in PROPERTY_MAP}


def _text(value):
    return [{"text": {"content": value}}]


_RENDERERS = {
    "title": _text,
    "rich_text": _text,
    "email": lambda value: value,
    "select": lambda value: {"name": value},
    "number": lambda value: value,
    "date": lambda value: {"start": value.isoformat()},
}


def build_properties(submission, property_names=None):
    """Render a Submission as a Notion ``properties`` payload."""
    names = dict(DEFAULT_PROPERTY_NAMES)
    names.update(property_names or {})
    properties = {}
    for field, attr, _, kind in PROPERTY_MAP:
        properties[names[field]] = {kind: _RENDERERS[kind](getattr(submission, attr))}
    return properties


def classify_api_error(code):
    if code == APIErrorCode.ObjectNotFound:
        return UpstreamTargetNotFound()
    if code == APIErrorCode.Unauthorized:
        return UpstreamUnauthorized()
    return UpstreamOther()


class RecordForwarder:
    """Creates one page per submission in a fixed Notion database."""

    def __init__(self, client, database_id, property_names=None):
        self.client = client
        self.database_id = database_id
        self.property_names = dict(property_names or {})

    def create(self, submission):
        try:
            page = self.client.pages.create(
                parent={"database_id": self.database_id},
                properties=build_properties(submission, self.property_names),
            )
        except APIResponseError as exc:
            logger.error("Notion rejected page creation: code=%s status=%s",
                         exc.code, exc.status)
            raise classify_api_error(exc.code) from exc
        except (HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as exc:
            logger.error("Error creating Notion page: %r", exc)
            raise UpstreamOther() from exc

        logger.info("Successfully created Notion page: %s", page["id"])
        return page["id"]
