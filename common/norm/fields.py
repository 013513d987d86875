from typing import Any, Dict, List, Mapping, Optional

from .dates import coerce_date

PASSTHROUGH_FIELDS = (
    "firstName",
    "lastName",
    "schoolCollegeName",
    "cityState",
    "gender",
    "otherCategory",
    "participationType",
    "description",
    "social",
    "requirements",
)


def coerce_category(raw: Any) -> List[Any]:
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    return [raw]


def coerce_confirmation(raw: Any) -> bool:
    # checkbox inputs submit "on" when ticked and nothing otherwise
    return raw == "on"


def build_registration(raw: Mapping[str, Any], photo_reference: Optional[str]) -> Dict[str, Any]:
    """Turn raw submitted fields into a persistence-ready registration mapping.

    Text fields are passed through untouched (no trimming or casing) and
    absent ones are left out; only ``dob``, ``category`` and ``confirmation``
    change shape.
    """
    record: Dict[str, Any] = {name: raw[name] for name in PASSTHROUGH_FIELDS if name in raw}
    record["dateOfBirth"] = coerce_date(raw.get("dob"))
    record["category"] = coerce_category(raw.get("category"))
    record["confirmation"] = coerce_confirmation(raw.get("confirmation"))
    record["profilePhotoReference"] = photo_reference
    return record
