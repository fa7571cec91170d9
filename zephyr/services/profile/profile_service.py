"""
Profile service for the profile wizard.

Stores one document per user, keyed by the identity platform's user id,
and decides whether the profile is complete enough to unlock chat.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import ValidationException
from zephyr.schemas.profile import ProfileForm

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Manages profile documents.
    """

    PROFILE_FIELDS = tuple(ProfileForm.model_fields)

    # All of these plus the usage agreement make a profile complete
    REQUIRED_ADDRESS_FIELDS = (
        "countryId",
        "admin1Id",
        "cityId",
        "postalCode",
        "addressDetail",
    )

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "profiles"):
        """
        Initialize ProfileService.

        Args:
            db: MongoDB database connection
            collection_name: Collection holding the profile documents
        """
        self._db = db
        self._profiles_collection = db[collection_name]

    async def get_profile_state(self, user_id: str) -> dict:
        """
        Get a user's profile together with its completeness.

        The profile holds every form field (empty strings when unset) and
        agreementAccepted.

        Completeness is judged on the stored fields. A legacy ``address``
        is shown as ``addressDetail`` but does not complete the profile
        until the wizard is saved again.

        Returns:
            dict with ``profile`` and ``profileComplete``
        """
        document = await self._profiles_collection.find_one({"_id": user_id})
        return {
            "profile": self._to_profile(document),
            "profileComplete": self.is_complete(document),
        }

    async def save_profile(self, user_id: str, form: ProfileForm) -> dict:
        """
        Save the full wizard form and return the new profile state.

        The document is merged, so fields written elsewhere survive.
        Submitting the form also records acceptance of the agreement.

        Raises:
            ValidationException: If any required address field is empty
        """
        missing = [field for field in self.REQUIRED_ADDRESS_FIELDS if not getattr(form, field)]
        if missing:
            raise ValidationException(
                message="Complete the full address first",
                code="ADDRESS_INCOMPLETE",
                details={"missingFields": missing},
            )

        now = datetime.now(timezone.utc)
        updates = form.model_dump()
        updates["agreementAccepted"] = True
        updates["updatedAt"] = now

        await self._merge(user_id, updates, now)

        logger.info(f"Profile saved for user {user_id}")
        return await self.get_profile_state(user_id)

    async def accept_agreement(self, user_id: str) -> dict:
        """Record that the user accepted the usage agreement and return the new profile state."""
        now = datetime.now(timezone.utc)
        await self._merge(
            user_id,
            {
                "agreementAccepted": True,
                "agreementAcceptedAt": now,
                "updatedAt": now,
            },
            now,
        )

        logger.info(f"Agreement accepted by user {user_id}")
        return await self.get_profile_state(user_id)

    @classmethod
    def is_complete(cls, profile: Optional[Mapping[str, Any]]) -> bool:
        """True when every required address field is set and the agreement is accepted."""
        if not profile:
            return False

        has_address = all(
            str(profile.get(field) or "").strip()
            for field in cls.REQUIRED_ADDRESS_FIELDS
        )
        return has_address and bool(profile.get("agreementAccepted"))

    async def _merge(self, user_id: str, updates: dict, now: datetime) -> None:
        await self._profiles_collection.update_one(
            {"_id": user_id},
            {
                "$set": updates,
                "$setOnInsert": {"createdAt": now},
            },
            upsert=True,
        )

    @classmethod
    def _to_profile(cls, document: Optional[Mapping[str, Any]]) -> dict:
        """Project a stored document onto the form fields."""
        document = document or {}
        profile = {
            field: str(document.get(field) or "")
            for field in cls.PROFILE_FIELDS
        }

        # Older documents kept the free-text address under "address"
        if not profile["addressDetail"]:
            profile["addressDetail"] = str(document.get("address") or "")

        profile["agreementAccepted"] = bool(document.get("agreementAccepted"))
        return profile
