"""Identity provider webhook route."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_session
from app.services.identity_sync import IdentitySyncService
from app.services.webhook_verifier import InvalidSignatureError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/identity-provider")
async def identity_provider_webhook(
    request: Request,
    session: AsyncSession = Depends(get_session),
):
    """Sync User rows from signed identity provider events.

    The signature covers the raw body, so it is read unparsed.
    """
    verifier = request.app.state.webhook_verifier
    if verifier is None:
        logger.error("Identity webhook secret is not set")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Webhook secret not configured"},
        )

    body = await request.body()
    try:
        verifier.verify(body, dict(request.headers))
    except InvalidSignatureError as e:
        logger.warning(f"Webhook verification failed: {e}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Invalid webhook signature"},
        )

    try:
        event = json.loads(body)
        await IdentitySyncService(session).handle(event)
    except Exception as e:
        logger.error(f"Webhook processing failed: {e}")
        await session.rollback()
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Webhook processing failed"},
        )

    return {"success": True, "received": True}
