"""Pydantic schemas for vertical-specific booking metadata.

Every field is optional: a booking may carry no vertical metadata at all.
Fields that are present must match their declared shape. Unknown keys are
kept as-is (``extra="allow"``) because each schema only describes what the
dashboard knows how to display, not a closed contract.
"""

import math
from typing import Annotated, Any, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic_core import PydanticCustomError


def _require_number(value: Any) -> Any:
    # bool is an int subclass; numeric strings are not numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return value


Number = Annotated[Any, AfterValidator(_require_number)]
StringList = list[StrictStr]


class MetadataSchema(BaseModel):
    """Base for all vertical metadata schemas."""

    model_config = ConfigDict(extra="allow")


class Coordinates(BaseModel):
    model_config = ConfigDict(extra="allow")

    lat: Number
    lng: Number


# ---------------------------------------------------------------------------
# One schema per vertical
# ---------------------------------------------------------------------------

class RestaurantMetadata(MetadataSchema):
    guests: Optional[Number] = None
    dietary: Optional[StringList] = None
    table_pref: Optional[StrictStr] = None
    menu_86: Optional[StringList] = None


class BeautyMetadata(MetadataSchema):
    service_type: Optional[Literal["Cut", "Color", "Massage", "Facial", "Other"]] = None
    duration: Optional[Number] = None  # minutes
    cabin: Optional[StrictStr] = None
    stylist: Optional[StrictStr] = None


class FitnessMetadata(MetadataSchema):
    class_type: Optional[Literal["Yoga", "Crossfit", "Pilates", "Zumba", "Other"]] = None
    level: Optional[Literal["Beginner", "Intermediate", "Advanced", "Pro"]] = None
    capacity: Optional[Number] = None
    coach: Optional[StrictStr] = None


class MedicalMetadata(MetadataSchema):
    patient_id: Optional[StrictStr] = None
    urgency: Optional[Literal["routine", "urgent", "emergency"]] = None
    symptoms: Optional[StringList] = None
    previous_visit: Optional[StrictBool] = None


class LegalMetadata(MetadataSchema):
    case_number: Optional[StrictStr] = None
    confidential: Optional[StrictBool] = None
    matter_type: Optional[StrictStr] = None
    documents: Optional[StringList] = None  # URLs


class RealEstateMetadata(MetadataSchema):
    property_ref: Optional[StrictStr] = None
    property_address: Optional[StrictStr] = None
    buyer_name: Optional[StrictStr] = None
    viewing_type: Optional[Literal["first", "follow_up", "final"]] = None
    coordinates: Optional[Coordinates] = None


class AutomotiveMetadata(MetadataSchema):
    vehicle_brand: Optional[StrictStr] = None
    vehicle_model: Optional[StrictStr] = None
    license_plate: Optional[StrictStr] = None
    repair_type: Optional[StrictStr] = None
    status: Optional[Literal["waiting", "workshop", "ready"]] = None
    estimated_cost: Optional[Number] = None


class TradesMetadata(MetadataSchema):
    address: Optional[StrictStr] = None
    access_code: Optional[StrictStr] = None
    problem_desc: Optional[StrictStr] = None
    tradesman_type: Optional[Literal["Plumber", "Electrician", "Carpenter", "Other"]] = None
    status: Optional[
        Literal["scheduled", "on_way", "arrived", "in_progress", "completed"]
    ] = None
    coordinates: Optional[Coordinates] = None
