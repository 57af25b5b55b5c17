"""Use case to upload a member photo."""

from pathlib import PurePosixPath

from src.application.ports.blob_store import BlobStorePort
from src.application.ports.members_repository import MembersRepositoryPort
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models.members import AuthorizationContext
from src.domain.policies.authorization import ensure_admin
from src.infrastructure.logging.logger import get_app_logger


ALLOWED_PHOTO_SUFFIXES = (".jpg", ".jpeg", ".png", ".webp")


class UploadMemberPhotoUseCase:
    """Store a photo in the blob store and save its public URL."""

    def __init__(
        self,
        members_repository: MembersRepositoryPort,
        blob_store: BlobStorePort,
        logger=None,
    ) -> None:
        self._members_repository = members_repository
        self._blob_store = blob_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        context: AuthorizationContext,
        member_id: str,
        filename: str,
        content: bytes,
    ) -> str:
        """Upload the photo and return its URL.

        Members may change their own photo; admins may change any photo.

        Raises:
            UnavailableError: If the session may not edit this member.
            NotFoundError: If the member does not exist.
            ValidationError: If the file is empty or not an image.
        """
        if context.member_id != member_id:
            ensure_admin(context, "change another member's photo")
        if self._members_repository.fetch_member(member_id) is None:
            raise NotFoundError(f"Member {member_id} not found")
        suffix = PurePosixPath(filename or "").suffix.lower()
        if suffix not in ALLOWED_PHOTO_SUFFIXES:
            raise ValidationError("Photo must be a JPEG, PNG or WebP image")
        if not content:
            raise ValidationError("Photo file is empty")

        path = f"members/{member_id}/photo{suffix}"
        url = self._blob_store.upload(path, content)
        self._members_repository.update_photo_url(member_id, url)
        self._logger.info(f"Photo uploaded for member {member_id}")
        return url


__all__ = ["UploadMemberPhotoUseCase", "ALLOWED_PHOTO_SUFFIXES"]
