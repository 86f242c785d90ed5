"""
Student Schema - the Student document and its embedded sub-records.

Student
├── name: UserName
├── guardian: Guardian
└── localGuardian: LocalGuardian

Every sub-record is required as a whole. `id` and `email` must be unique
across the collection; that part is enforced by the store (see
db.mongodb.init_mongo_indexes), not here.
"""

import re
from enum import Enum
from typing import Annotated, Optional

from pydantic import StringConstraints, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from student_records.schemas.base import DocumentSchema, check_pattern
from student_records.schemas.messages import MessageCatalog, render_message


# ============================================================
# FIELD TYPES
# ============================================================

RequiredStr = Annotated[str, StringConstraints(min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]
RequiredTrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NamePart = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]

CONTACT_NO_PATTERN = re.compile(r"[0-9]{10}")
DATE_OF_BIRTH_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PROFILE_IMG_PATTERN = re.compile(r".*\.(jpg|jpeg|png|gif)", re.IGNORECASE | re.ASCII | re.DOTALL)


# ============================================================
# ENUMS
# ============================================================

class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class BloodGroup(str, Enum):
    a_positive = "A+"
    a_negative = "A-"
    b_positive = "B+"
    b_negative = "B-"
    ab_positive = "AB+"
    ab_negative = "AB-"
    o_positive = "O+"
    o_negative = "O-"


class StudentStatus(str, Enum):
    active = "active"
    blocked = "blocked"


# ============================================================
# MESSAGES
# ============================================================

FIRST_NAME_NOT_CAPITALIZED = "{VALUE} is not capitalized format"
DATE_OF_BIRTH_FORMAT = "Date of birth must be in the format YYYY-MM-DD"
EMAIL_FORMAT = "Please provide a valid email address"
PROFILE_IMG_FORMAT = "Profile image must be a valid image format (jpg, jpeg, png, gif)"

GUARDIAN_CONTACT_MESSAGES = {
    "father_contact_no": "Father's contact number must be a 10-digit number",
    "mother_contact_no": "Mother's contact number must be a 10-digit number",
}
STUDENT_CONTACT_MESSAGES = {
    "contact_no": "Contact number must be a 10-digit number",
    "emergency_contact_no": "Emergency contact number must be a 10-digit number",
}

STUDENT_MESSAGES = MessageCatalog(
    required={
        "id": "Student ID is required",
        "name": "Student name is required",
        "name.firstName": "First name is required and cannot be empty",
        "name.lastName": "Last name is required and cannot be empty",
        "gender": "Gender is required",
        "dateOfBirth": "Date of birth is required",
        "email": "Email address is required",
        "contactNo": "Contact number is required",
        "emergencyContactNo": "Emergency contact number is required",
        "presentAddress": "Present address is required",
        "permanentAddress": "Permanent address is required",
        "guardian": "Guardian details are required",
        "guardian.fatherName": "Father's name is required",
        "guardian.fatherOccupation": "Father's occupation is required",
        "guardian.fatherContactNo": "Father's contact number is required",
        "guardian.motherName": "Mother's name is required",
        "guardian.motherOccupation": "Mother's occupation is required",
        "guardian.motherContactNo": "Mother's contact number is required",
        "localGuardian": "Local guardian details are required",
        "localGuardian.name": "Local guardian's name is required",
        "localGuardian.occupation": "Local guardian's occupation is required",
        "localGuardian.contactNo": "Local guardian's contact number is required",
        "localGuardian.address": "Local guardian's address is required",
    },
    maxlength={
        "name.firstName": "First name cannot be more than 20 characters",
        "name.lastName": "Last name can not be more than 20 characters",
    },
    enum={
        "gender": "{VALUE} is not a valid gender. Valid values are: male, female, or other",
        "bloodGroup": "{VALUE} is not a valid blood group. Valid values are: A+, A-, B+, B-, AB+, AB-, O+, O-",
        "isActive": "{VALUE} is not a valid status. Valid values are: active, blocked",
    },
)


# ============================================================
# SUB-SCHEMAS
# ============================================================

class UserName(DocumentSchema):
    first_name: NamePart
    middle_name: Optional[TrimmedStr] = None
    last_name: NamePart

    @field_validator("first_name")
    @classmethod
    def check_capitalized(cls, value: str) -> str:
        if value != value[0].upper() + value[1:].lower():
            raise PydanticCustomError(
                "capitalized", render_message(FIRST_NAME_NOT_CAPITALIZED, value, "firstName")
            )
        return value


class Guardian(DocumentSchema):
    father_name: RequiredStr
    father_occupation: RequiredStr
    father_contact_no: RequiredStr
    mother_name: RequiredStr
    mother_occupation: RequiredStr
    mother_contact_no: RequiredStr

    @field_validator("father_contact_no", "mother_contact_no")
    @classmethod
    def check_contact_no(cls, value: str, info: ValidationInfo) -> str:
        return check_pattern(CONTACT_NO_PATTERN, value, GUARDIAN_CONTACT_MESSAGES[info.field_name])


class LocalGuardian(DocumentSchema):
    name: RequiredStr
    occupation: RequiredStr
    contact_no: RequiredStr
    address: RequiredStr

    @field_validator("contact_no")
    @classmethod
    def check_contact_no(cls, value: str) -> str:
        return check_pattern(
            CONTACT_NO_PATTERN, value, "Local guardian's contact number must be a 10-digit number"
        )


# ============================================================
# STUDENT
# ============================================================

class Student(DocumentSchema):
    id: RequiredStr
    name: UserName
    gender: Gender
    date_of_birth: RequiredStr
    email: RequiredTrimmedStr
    contact_no: RequiredStr
    emergency_contact_no: RequiredStr
    blood_group: Optional[BloodGroup] = None
    present_address: RequiredStr
    permanent_address: RequiredStr
    guardian: Guardian
    local_guardian: LocalGuardian
    profile_img: Optional[str] = None
    is_active: StudentStatus = StudentStatus.active

    @field_validator("date_of_birth")
    @classmethod
    def check_date_of_birth(cls, value: str) -> str:
        return check_pattern(DATE_OF_BIRTH_PATTERN, value, DATE_OF_BIRTH_FORMAT)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return check_pattern(EMAIL_PATTERN, value, EMAIL_FORMAT)

    @field_validator("contact_no", "emergency_contact_no")
    @classmethod
    def check_contact_no(cls, value: str, info: ValidationInfo) -> str:
        return check_pattern(CONTACT_NO_PATTERN, value, STUDENT_CONTACT_MESSAGES[info.field_name])

    @field_validator("profile_img")
    @classmethod
    def check_profile_img(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return check_pattern(PROFILE_IMG_PATTERN, value, PROFILE_IMG_FORMAT)
