"""
scoring/validation.py

Required-field schema for ESG submissions.

Checked before the engine runs. Sections are checked in declared order,
then fields within a section in declared order; the first gap is reported.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from app.core.exceptions import MissingFieldException, MissingSectionException
from app.models.enumerations import ESGSection

REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    ESGSection.FOSSIL_FUEL.value: ("diesel", "petrol", "naturalGas"),
    ESGSection.FUGITIVE.value: ("refrigerantLeakage", "gasLeakage"),
    ESGSection.ELECTRICITY.value: ("consumption", "renewablePercent", "gridEmissionFactor"),
    ESGSection.WATER.value: ("usage", "intensity"),
    ESGSection.WASTE.value: ("generated", "recycledPercent"),
    ESGSection.TRAVEL.value: ("businessTravelEmissions",),
    ESGSection.OFFSETS.value: ("carbonOffsets",),
    ESGSection.SOCIAL.value: (
        "employeeTurnoverPercent",
        "injuryRate",
        "genderDiversityPercent",
        "trainingHoursPerEmployee",
        "communityInvestmentPercent",
    ),
    ESGSection.GOVERNANCE.value: (
        "boardIndependencePercent",
        "auditCommittee",
        "antiCorruptionPolicy",
        "executivePayRatio",
        "shareholderRightsScore",
    ),
}


def find_missing_fields(payload: Mapping[str, Any]) -> List[Tuple[str, Optional[str]]]:
    """
    Return every (section, field) gap in payload.

    A missing section is reported once as (section, None).
    """
    missing: List[Tuple[str, Optional[str]]] = []
    for section, required in REQUIRED_FIELDS.items():
        values = payload.get(section)
        if not isinstance(values, Mapping):
            missing.append((section, None))
            continue
        for field in required:
            if values.get(field) is None:
                missing.append((section, field))
    return missing


def validate_required_fields(payload: Mapping[str, Any]) -> None:
    """
    Raise for the first missing section or field.

    Raises:
        MissingSectionException: section absent, null or not an object
        MissingFieldException: field absent or null
    """
    if not isinstance(payload, Mapping):
        raise MissingSectionException(next(iter(REQUIRED_FIELDS)))

    missing = find_missing_fields(payload)
    if not missing:
        return
    section, field = missing[0]
    if field is None:
        raise MissingSectionException(section)
    raise MissingFieldException(section, field)
