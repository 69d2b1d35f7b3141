"""Job seeker profile and resume service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BlobStorageError, NotFoundError
from app.core.security import ApplicantContext
from app.models.user import User
from app.services.blob.base import BlobStore
from app.utils.uploads import ValidatedUpload

logger = logging.getLogger(__name__)

RESUME_FOLDER = "resumes"


class UserService:
    """Profile operations for authenticated job seekers."""

    def __init__(self, session: AsyncSession, blob_store: BlobStore):
        self.session = session
        self.blob_store = blob_store

    async def get_profile(self, actor: ApplicantContext) -> User:
        user = await self.session.get(User, actor.user_id)
        if user is None:
            raise NotFoundError("User not found. Please complete registration.")
        return user

    async def update_profile(self, actor: ApplicantContext, name: str | None) -> User:
        user = await self.session.get(User, actor.user_id)
        if user is None:
            raise NotFoundError("User not found.")
        if name and name.strip():
            user.name = name.strip()
        await self.session.commit()
        return user

    async def replace_resume(self, actor: ApplicantContext, resume: ValidatedUpload) -> str:
        """Store a new resume and return its URL.

        The previous blob is deleted first; failing to delete it is logged
        and ignored. If the upload fails, the stored reference is unchanged.
        """
        user = await self.session.get(User, actor.user_id)
        if user is None:
            raise NotFoundError("User not found.")

        if user.resume:
            try:
                await self.blob_store.delete(user.resume)
            except BlobStorageError as e:
                logger.warning(f"Could not delete old resume of {actor.log_label}: {e}")

        url = await self.blob_store.upload(
            resume.data, RESUME_FOLDER, resume.filename, resume.content_type
        )

        user.resume = url
        await self.session.commit()
        logger.info(f"Resume replaced for {actor.log_label}")
        return url
