"""Unit tests for ProfileService (merge-on-save profile documents)."""

import pytest
from unittest.mock import ANY

from common.utils.exceptions import ValidationException
from zephyr.schemas.profile import ProfileForm
from zephyr.services.profile.profile_service import ProfileService


# ─────────────────────────────────────────────────────────────────
# get_profile_state
# ─────────────────────────────────────────────────────────────────


class TestGetProfileState:
    @pytest.mark.asyncio
    async def test_missing_document_gives_empty_form(self, profile_service, mock_collection, sample_user_id):
        profile = (await profile_service.get_profile_state(sample_user_id))["profile"]

        mock_collection.find_one.assert_awaited_once_with({"_id": sample_user_id})
        assert profile["countryId"] == ""
        assert profile["addressDetail"] == ""
        assert profile["agreementAccepted"] is False
        assert set(profile) == set(ProfileService.PROFILE_FIELDS) | {"agreementAccepted"}

    @pytest.mark.asyncio
    async def test_stored_fields_are_returned(self, profile_service, mock_collection, complete_profile_doc, sample_user_id):
        mock_collection.find_one.return_value = complete_profile_doc

        profile = (await profile_service.get_profile_state(sample_user_id))["profile"]

        assert profile["cityName"] == "Klaten"
        assert profile["postalCode"] == "57411"
        assert profile["agreementAccepted"] is True
        assert "_id" not in profile
        assert "updatedAt" not in profile

    @pytest.mark.asyncio
    async def test_legacy_address_fills_address_detail(self, profile_service, mock_collection, sample_user_id):
        mock_collection.find_one.return_value = {
            "_id": sample_user_id,
            "address": "Jl. Lama No. 9",
        }

        profile = (await profile_service.get_profile_state(sample_user_id))["profile"]

        assert profile["addressDetail"] == "Jl. Lama No. 9"

    @pytest.mark.asyncio
    async def test_address_detail_wins_over_legacy_address(self, profile_service, mock_collection, sample_user_id):
        mock_collection.find_one.return_value = {
            "_id": sample_user_id,
            "address": "old",
            "addressDetail": "new",
        }

        profile = (await profile_service.get_profile_state(sample_user_id))["profile"]

        assert profile["addressDetail"] == "new"

    @pytest.mark.asyncio
    async def test_completeness_reported(self, profile_service, mock_collection, complete_profile_doc, sample_user_id):
        mock_collection.find_one.return_value = complete_profile_doc

        state = await profile_service.get_profile_state(sample_user_id)

        assert state["profileComplete"] is True

    @pytest.mark.asyncio
    async def test_legacy_address_does_not_complete_profile(
        self, profile_service, mock_collection, complete_profile_doc, sample_user_id
    ):
        legacy = dict(complete_profile_doc)
        legacy["address"] = legacy.pop("addressDetail")
        mock_collection.find_one.return_value = legacy

        state = await profile_service.get_profile_state(sample_user_id)

        assert state["profile"]["addressDetail"] == "Jl. Pemuda No. 1"
        assert state["profileComplete"] is False


# ─────────────────────────────────────────────────────────────────
# save_profile
# ─────────────────────────────────────────────────────────────────


class TestSaveProfile:
    @pytest.mark.asyncio
    async def test_merges_form_and_accepts_agreement(
        self, profile_service, mock_collection, profile_form_data, complete_profile_doc, sample_user_id
    ):
        mock_collection.find_one.return_value = complete_profile_doc

        state = await profile_service.save_profile(sample_user_id, ProfileForm(**profile_form_data))

        mock_collection.update_one.assert_awaited_once()
        args, kwargs = mock_collection.update_one.call_args
        assert args[0] == {"_id": sample_user_id}
        assert kwargs["upsert"] is True

        update = args[1]
        assert update["$setOnInsert"] == {"createdAt": ANY}
        assert update["$set"]["agreementAccepted"] is True
        assert "updatedAt" in update["$set"]
        for field in ProfileService.REQUIRED_ADDRESS_FIELDS:
            assert update["$set"][field] == profile_form_data[field]

        assert state["profileComplete"] is True

    @pytest.mark.asyncio
    async def test_incomplete_address_is_rejected(self, profile_service, mock_collection, profile_form_data, sample_user_id):
        profile_form_data["cityId"] = ""
        profile_form_data["postalCode"] = "   "

        with pytest.raises(ValidationException) as exc_info:
            await profile_service.save_profile(sample_user_id, ProfileForm(**profile_form_data))

        assert exc_info.value.status_code == 422
        assert exc_info.value.code == "ADDRESS_INCOMPLETE"
        assert exc_info.value.detail["details"] == {"missingFields": ["cityId", "postalCode"]}
        mock_collection.update_one.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# accept_agreement
# ─────────────────────────────────────────────────────────────────


class TestAcceptAgreement:
    @pytest.mark.asyncio
    async def test_sets_only_agreement_fields(self, profile_service, mock_collection, sample_user_id):
        await profile_service.accept_agreement(sample_user_id)

        args, kwargs = mock_collection.update_one.call_args
        assert set(args[1]["$set"]) == {"agreementAccepted", "agreementAcceptedAt", "updatedAt"}
        assert args[1]["$set"]["agreementAccepted"] is True
        assert kwargs["upsert"] is True


# ─────────────────────────────────────────────────────────────────
# is_complete
# ─────────────────────────────────────────────────────────────────


class TestIsComplete:
    def test_complete_profile(self, complete_profile_doc):
        assert ProfileService.is_complete(complete_profile_doc) is True

    def test_none_is_incomplete(self):
        assert ProfileService.is_complete(None) is False

    def test_agreement_is_required(self, complete_profile_doc):
        complete_profile_doc["agreementAccepted"] = False
        assert ProfileService.is_complete(complete_profile_doc) is False

    @pytest.mark.parametrize("field", ProfileService.REQUIRED_ADDRESS_FIELDS)
    def test_each_address_field_is_required(self, complete_profile_doc, field):
        complete_profile_doc[field] = "  "
        assert ProfileService.is_complete(complete_profile_doc) is False

    def test_optional_fields_can_be_empty(self, complete_profile_doc):
        complete_profile_doc["fullName"] = ""
        complete_profile_doc["birthDate"] = ""
        assert ProfileService.is_complete(complete_profile_doc) is True


class TestProfileForm:
    def test_values_are_trimmed(self):
        form = ProfileForm(fullName="  Dana  ", postalCode=" 57411 ", gender=None)

        assert form.fullName == "Dana"
        assert form.postalCode == "57411"
        assert form.gender == ""

    def test_long_address_is_rejected(self):
        with pytest.raises(ValueError):
            ProfileForm(addressDetail="x" * 501)
