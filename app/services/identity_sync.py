"""Reconciles identity provider user events into local User rows."""

import logging
from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User

logger = logging.getLogger(__name__)

USER_CREATED = "user.created"
USER_UPDATED = "user.updated"
USER_DELETED = "user.deleted"


def profile_fields(data: dict[str, Any]) -> dict[str, str]:
    """Derive name, email and image from a provider user payload."""
    full_name = f"{data.get('first_name') or ''} {data.get('last_name') or ''}".strip()
    addresses = data.get("email_addresses") or []
    email = (addresses[0].get("email_address") if addresses else None) or ""
    return {
        "name": full_name or "User",
        "email": email.strip().lower(),
        "image": data.get("image_url") or "",
    }


class IdentitySyncService:
    """Applies user lifecycle events to the users table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def handle(self, event: dict[str, Any]) -> None:
        event_type = event.get("type")
        data = event.get("data") or {}
        logger.info(f"Identity event received: {event_type}")

        if event_type == USER_CREATED:
            await self.created(data)
        elif event_type == USER_UPDATED:
            await self.updated(data)
        elif event_type == USER_DELETED:
            await self.deleted(data)
        else:
            logger.info(f"Unhandled identity event type: {event_type}")

    async def created(self, data: dict[str, Any]) -> None:
        user = User(id=data["id"], **profile_fields(data))
        self.session.add(user)
        await self.session.commit()
        logger.info(f"User created: {user.id}")

    async def updated(self, data: dict[str, Any]) -> None:
        """Overwrite every profile field; an unknown ID matches nothing."""
        result = await self.session.execute(
            update(User).where(User.id == data["id"]).values(**profile_fields(data))
        )
        await self.session.commit()
        logger.info(f"User updated: {data['id']} ({result.rowcount} rows)")

    async def deleted(self, data: dict[str, Any]) -> None:
        await self.session.execute(delete(User).where(User.id == data["id"]))
        await self.session.commit()
        logger.info(f"User deleted: {data['id']}")
