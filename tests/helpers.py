"""Test doubles and request helpers shared across test modules."""

import json
import uuid
from datetime import UTC, datetime

from svix.webhooks import Webhook

from app.core.exceptions import AuthenticationError, BlobStorageError
from app.services.blob.base import BlobStore

WEBHOOK_SECRET = "whsec_MfKQ9r8GKYqrTwjUPD8ILPZIo2LaLaSw"
BLOB_BASE_URL = "https://blobs.test/job-portal-bucket"


class InMemoryBlobStore(BlobStore):
    """Blob store keeping objects in a dict."""

    def __init__(self, base_url: str = BLOB_BASE_URL):
        self.base_url = base_url
        self.objects: dict[str, bytes] = {}
        self.fail_upload = False
        self.fail_delete = False
        self.deleted: list[str] = []

    def key_from_url(self, url: str) -> str | None:
        prefix = f"{self.base_url}/"
        return url[len(prefix):] if url and url.startswith(prefix) else None

    async def upload(self, data, folder, filename, content_type):
        if self.fail_upload:
            raise BlobStorageError("upload refused")
        key = f"job-portal/{folder}/{uuid.uuid4().hex}-{filename}"
        self.objects[key] = data
        return f"{self.base_url}/{key}"

    async def delete(self, url):
        if self.fail_delete:
            raise BlobStorageError("delete refused")
        key = self.key_from_url(url)
        if key is not None:
            self.objects.pop(key, None)
            self.deleted.append(key)


class FakeIdentityProvider:
    """Identity provider accepting a fixed set of session tokens."""

    def __init__(self, sessions: dict[str, str] | None = None):
        self.sessions = dict(sessions or {})

    async def verify_session(self, token: str) -> str:
        user_id = self.sessions.get(token)
        if user_id is None:
            raise AuthenticationError("Authentication failed.", reason="invalid")
        return user_id

    async def close(self) -> None:
        pass


def applicant_token(user_id: str) -> str:
    return f"session-{user_id}"


def signed_webhook(event: dict, secret: str = WEBHOOK_SECRET) -> tuple[str, dict]:
    """Body and svix headers for an identity provider event."""
    body = json.dumps(event)
    return body, signature_headers(body, secret)


def signature_headers(body: str, secret: str = WEBHOOK_SECRET) -> dict:
    """svix headers signing a raw body."""
    msg_id = f"msg_{uuid.uuid4().hex}"
    timestamp = datetime.now(UTC)
    signature = Webhook(secret).sign(msg_id, timestamp, body)
    headers = {
        "svix-id": msg_id,
        "svix-timestamp": str(int(timestamp.timestamp())),
        "svix-signature": signature,
        "content-type": "application/json",
    }
    return headers


def user_event(event_type: str, user_id: str, first="Alice", last="Smith", email=None):
    data = {"id": user_id}
    if event_type != "user.deleted":
        data.update(
            {
                "first_name": first,
                "last_name": last,
                "email_addresses": [{"email_address": email or f"{user_id}@mail.com"}],
                "image_url": f"https://img.example/{user_id}.png",
            }
        )
    return {"type": event_type, "data": data}
