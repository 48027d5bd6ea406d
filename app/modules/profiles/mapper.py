"""
Translation between raw `client` rows and the UserProfile shape the portal works with.

Completion is weighted: required fields always count towards the total, optional
fields only count (towards both total and completed) once they are filled in.
"""

import math
from typing import Any, Dict, Mapping, NamedTuple, Optional

from app.modules.profiles.schemas import UserProfile, ProfileUpdate


class CompletionField(NamedTuple):
    name: str
    weight: int
    required: bool


COMPLETION_FIELDS = (
    CompletionField("name", 20, True),
    CompletionField("contact_person_phone", 15, True),
    CompletionField("contact_person_address", 15, True),
    CompletionField("entity_type", 20, True),
    CompletionField("contact_person_name", 10, False),
    CompletionField("image_url", 5, False),
)

REQUIRED_PROFILE_FIELDS = tuple(f.name for f in COMPLETION_FIELDS if f.required)


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def get_profile_completion_percentage(record: Mapping[str, Any]) -> int:
    total_weight = 0
    completed_weight = 0
    for field in COMPLETION_FIELDS:
        present = _is_present(record.get(field.name))
        if field.required:
            total_weight += field.weight
            if present:
                completed_weight += field.weight
        elif present:
            total_weight += field.weight
            completed_weight += field.weight
    if total_weight == 0:
        return 0
    # Half rounds up
    return int(math.floor(completed_weight / total_weight * 100 + 0.5))


def is_profile_complete(record: Mapping[str, Any]) -> bool:
    """A row missing any of the gating columns is treated as complete so users are never locked out."""
    if not all(key in record for key in ("entity_type", "contact_person_phone", "contact_person_address")):
        return True
    return all(record.get(name) for name in REQUIRED_PROFILE_FIELDS)


def map_client_to_profile(record: Mapping[str, Any], email: str) -> UserProfile:
    entity_type = record.get("entity_type") or ""
    return UserProfile(
        id=record["id"],
        email=record.get("contact_person_email") or email,
        name=record.get("name") or "",
        phone=record.get("contact_person_phone") or "",
        address=record.get("contact_person_address") or "",
        avatar_url=record.get("image_url") or "",
        client_type=entity_type,
        company_name=(record.get("name") or "") if entity_type == "company" else "",
        created_at=record.get("created_at"),
        updated_at=record.get("updated_at"),
    )


def build_profile(record: Mapping[str, Any], email: str, completed: Optional[bool] = None) -> UserProfile:
    """Map a row and attach completion data; `completed` overrides the computed flag."""
    profile = map_client_to_profile(record, email)
    profile.profile_completed = is_profile_complete(record) if completed is None else completed
    profile.completion_percentage = get_profile_completion_percentage(record)
    return profile


def fallback_profile(user: Mapping[str, Any]) -> UserProfile:
    """Minimal profile flagged complete, used whenever the client row can't be trusted."""
    metadata = user.get("user_metadata") or {}
    return UserProfile(
        id=user["id"],
        email=user.get("email") or "",
        name=metadata.get("name") or "",
        profile_completed=True,
        completion_percentage=100,
    )


def default_client_row(user: Mapping[str, Any]) -> Dict[str, Any]:
    metadata = user.get("user_metadata") or {}
    return {
        "id": user["id"],
        "name": metadata.get("name") or "",
        "contact_person_name": metadata.get("name") or "",
        "contact_person_email": user.get("email") or "",
        "contact_person_phone": metadata.get("phone") or "",
        "contact_person_address": "",
        "entity_type": "",
        "status": "active",
    }


def profile_to_client_update(profile: ProfileUpdate) -> Dict[str, Any]:
    client_data = {
        "name": profile.name,
        "contact_person_phone": profile.phone,
        "contact_person_address": profile.address,
        "contact_person_email": profile.email,
        "image_url": profile.avatar_url,
    }
    if profile.client_type:
        client_data["entity_type"] = profile.client_type
        if profile.client_type == "company" and profile.company_name:
            client_data["name"] = profile.company_name
    return {key: value for key, value in client_data.items() if value is not None}
