"""Signature verification for identity provider webhooks."""

from svix.webhooks import Webhook, WebhookVerificationError

SIGNATURE_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")


class InvalidSignatureError(Exception):
    """Raised when a webhook payload does not carry a valid signature."""


class WebhookVerifier:
    """Verifies raw webhook bodies against the provider's signing secret.

    Only the signature is checked here; decoding the body is left to the
    caller.
    """

    def __init__(self, secret: str):
        self._webhook = Webhook(secret)

    def verify(self, body: bytes, headers: dict[str, str]) -> None:
        """Raise InvalidSignatureError unless ``body`` is signed by the provider."""
        signed_headers = {name: headers.get(name, "") for name in SIGNATURE_HEADERS}
        try:
            self._webhook.verify(body, signed_headers)
        except WebhookVerificationError as e:
            raise InvalidSignatureError(str(e)) from e
