import pytest

from student_records.core.errors import ValidationError
from student_records.models import StudentModel


def errors_for(record):
    with pytest.raises(ValidationError) as exc_info:
        StudentModel.validate(record)
    return exc_info.value.messages


def test_valid_student_passes(student_data):
    """A record meeting every rule comes back normalized."""
    doc = StudentModel.validate(student_data)

    assert doc["id"] == "S-1001"
    assert doc["name"] == {"firstName": "John", "middleName": "Paul", "lastName": "Doe"}
    assert doc["gender"] == "male"
    assert doc["bloodGroup"] == "O+"
    assert doc["guardian"]["fatherContactNo"] == "9000000001"
    assert doc["localGuardian"]["address"] == "7 Park Avenue, Pune"
    assert doc["isActive"] == "active"


def test_optional_fields_may_be_omitted(student_data):
    for field in ("bloodGroup", "profileImg"):
        del student_data[field]
    del student_data["name"]["middleName"]

    doc = StudentModel.validate(student_data)

    assert "bloodGroup" not in doc
    assert "profileImg" not in doc
    assert "middleName" not in doc["name"]


def test_is_active_defaults_to_active(student_data):
    student_data.pop("isActive", None)
    assert StudentModel.validate(student_data)["isActive"] == "active"


def test_is_active_null_gets_default(student_data):
    student_data["isActive"] = None
    assert StudentModel.validate(student_data)["isActive"] == "active"


def test_is_active_blocked_kept(student_data):
    student_data["isActive"] = "blocked"
    assert StudentModel.validate(student_data)["isActive"] == "blocked"


def test_invalid_status_names_value(student_data):
    student_data["isActive"] = "suspended"
    assert errors_for(student_data) == {
        "isActive": "suspended is not a valid status. Valid values are: active, blocked"
    }


# ============================================================
# NAME
# ============================================================

@pytest.mark.parametrize("first_name", ["john", "JOHN", "jOHN", "JoHn"])
def test_first_name_must_be_capitalized(student_data, first_name):
    student_data["name"]["firstName"] = first_name
    assert errors_for(student_data) == {
        "name.firstName": f"{first_name} is not capitalized format"
    }


def test_single_letter_first_name_is_capitalized(student_data):
    student_data["name"]["firstName"] = "J"
    assert StudentModel.validate(student_data)["name"]["firstName"] == "J"


def test_name_parts_are_trimmed(student_data):
    student_data["name"] = {"firstName": "  John ", "middleName": " Paul ", "lastName": " Doe  "}
    assert StudentModel.validate(student_data)["name"] == {
        "firstName": "John", "middleName": "Paul", "lastName": "Doe"
    }


def test_first_name_longer_than_20(student_data):
    student_data["name"]["firstName"] = "A" + "b" * 20
    assert errors_for(student_data) == {
        "name.firstName": "First name cannot be more than 20 characters"
    }


def test_first_name_of_20_after_trim_passes(student_data):
    student_data["name"]["firstName"] = "  " + "A" + "b" * 19 + "  "
    assert len(StudentModel.validate(student_data)["name"]["firstName"]) == 20


def test_last_name_longer_than_20(student_data):
    student_data["name"]["lastName"] = "x" * 21
    assert errors_for(student_data) == {
        "name.lastName": "Last name can not be more than 20 characters"
    }


def test_blank_first_name_is_missing(student_data):
    student_data["name"]["firstName"] = "   "
    assert errors_for(student_data) == {
        "name.firstName": "First name is required and cannot be empty"
    }


def test_missing_last_name(student_data):
    del student_data["name"]["lastName"]
    assert errors_for(student_data) == {
        "name.lastName": "Last name is required and cannot be empty"
    }


# ============================================================
# CONTACT NUMBERS
# ============================================================

@pytest.mark.parametrize("number", ["12345", "12345678a0", "98765432100", "98765-43210", "9876543210\n", "٩٨٧٦٥٤٣٢١٠"])
def test_bad_contact_numbers_rejected(student_data, number):
    student_data["contactNo"] = number
    assert errors_for(student_data) == {"contactNo": "Contact number must be a 10-digit number"}


def test_numeric_contact_number_is_cast(student_data):
    student_data["contactNo"] = 9876543210
    assert StudentModel.validate(student_data)["contactNo"] == "9876543210"


def test_whole_float_contact_number_is_cast_without_decimals(student_data):
    student_data["contactNo"] = 9876543210.0
    assert StudentModel.validate(student_data)["contactNo"] == "9876543210"


def test_fractional_float_contact_number_rejected(student_data):
    student_data["contactNo"] = 987654321.5
    assert errors_for(student_data) == {"contactNo": "Contact number must be a 10-digit number"}


@pytest.mark.parametrize("path, message", [
    (("emergencyContactNo",), "Emergency contact number must be a 10-digit number"),
    (("guardian", "fatherContactNo"), "Father's contact number must be a 10-digit number"),
    (("guardian", "motherContactNo"), "Mother's contact number must be a 10-digit number"),
    (("localGuardian", "contactNo"), "Local guardian's contact number must be a 10-digit number"),
])
def test_each_contact_number_has_own_message(student_data, path, message):
    target = student_data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = "12345"

    assert errors_for(student_data) == {".".join(path): message}


# ============================================================
# DATE OF BIRTH / EMAIL / PROFILE IMAGE
# ============================================================

@pytest.mark.parametrize("dob", ["05-10-2001", "2001/05/10", "2001-5-10", "01-05-10", "٢٠٠١-05-10"])
def test_bad_date_of_birth(student_data, dob):
    student_data["dateOfBirth"] = dob
    assert errors_for(student_data) == {
        "dateOfBirth": "Date of birth must be in the format YYYY-MM-DD"
    }


def test_date_of_birth_shape_only(student_data):
    student_data["dateOfBirth"] = "2001-13-45"
    assert StudentModel.validate(student_data)["dateOfBirth"] == "2001-13-45"


@pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@school-mail.edu.in"])
def test_good_emails(student_data, email):
    student_data["email"] = email
    assert StudentModel.validate(student_data)["email"] == email


@pytest.mark.parametrize("email", ["a@b", "a.b.co", "a@b.c", "a b@c.com"])
def test_bad_emails(student_data, email):
    student_data["email"] = email
    assert errors_for(student_data) == {"email": "Please provide a valid email address"}


def test_email_is_trimmed(student_data):
    student_data["email"] = "  a@b.co "
    assert StudentModel.validate(student_data)["email"] == "a@b.co"


@pytest.mark.parametrize("img", ["pic.PNG", "pic.jpeg", "a/b/c.Gif", "photo.JPG"])
def test_good_profile_images(student_data, img):
    student_data["profileImg"] = img
    assert StudentModel.validate(student_data)["profileImg"] == img


@pytest.mark.parametrize("img", ["pic.bmp", "pic.png.exe", "png", ""])
def test_bad_profile_images(student_data, img):
    student_data["profileImg"] = img
    assert errors_for(student_data) == {
        "profileImg": "Profile image must be a valid image format (jpg, jpeg, png, gif)"
    }


# ============================================================
# ENUMS
# ============================================================

@pytest.mark.parametrize("gender", ["male", "female", "other"])
def test_good_genders(student_data, gender):
    student_data["gender"] = gender
    assert StudentModel.validate(student_data)["gender"] == gender


def test_unknown_gender_names_value(student_data):
    student_data["gender"] = "unknown"
    assert errors_for(student_data) == {
        "gender": "unknown is not a valid gender. Valid values are: male, female, or other"
    }


@pytest.mark.parametrize("blood_group", ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"])
def test_good_blood_groups(student_data, blood_group):
    student_data["bloodGroup"] = blood_group
    assert StudentModel.validate(student_data)["bloodGroup"] == blood_group


def test_unknown_blood_group_names_value(student_data):
    student_data["bloodGroup"] = "C+"
    assert errors_for(student_data) == {
        "bloodGroup": "C+ is not a valid blood group. Valid values are: A+, A-, B+, B-, AB+, AB-, O+, O-"
    }


# ============================================================
# REQUIRED FIELDS
# ============================================================

@pytest.mark.parametrize("field, message", [
    ("id", "Student ID is required"),
    ("name", "Student name is required"),
    ("gender", "Gender is required"),
    ("dateOfBirth", "Date of birth is required"),
    ("email", "Email address is required"),
    ("contactNo", "Contact number is required"),
    ("emergencyContactNo", "Emergency contact number is required"),
    ("presentAddress", "Present address is required"),
    ("permanentAddress", "Permanent address is required"),
    ("guardian", "Guardian details are required"),
    ("localGuardian", "Local guardian details are required"),
])
def test_missing_required_field(student_data, field, message):
    del student_data[field]
    assert errors_for(student_data) == {field: message}


def test_null_required_field_counts_as_missing(student_data):
    student_data["guardian"] = None
    assert errors_for(student_data) == {"guardian": "Guardian details are required"}


def test_empty_string_counts_as_missing(student_data):
    student_data["presentAddress"] = ""
    assert errors_for(student_data) == {"presentAddress": "Present address is required"}


@pytest.mark.parametrize("field, message", [
    ("fatherName", "Father's name is required"),
    ("fatherOccupation", "Father's occupation is required"),
    ("fatherContactNo", "Father's contact number is required"),
    ("motherName", "Mother's name is required"),
    ("motherOccupation", "Mother's occupation is required"),
    ("motherContactNo", "Mother's contact number is required"),
])
def test_partial_guardian_rejected(student_data, field, message):
    del student_data["guardian"][field]
    assert errors_for(student_data) == {f"guardian.{field}": message}


@pytest.mark.parametrize("field, message", [
    ("name", "Local guardian's name is required"),
    ("occupation", "Local guardian's occupation is required"),
    ("contactNo", "Local guardian's contact number is required"),
    ("address", "Local guardian's address is required"),
])
def test_partial_local_guardian_rejected(student_data, field, message):
    del student_data["localGuardian"][field]
    assert errors_for(student_data) == {f"localGuardian.{field}": message}


# ============================================================
# REPORTING
# ============================================================

def test_every_failing_field_reported_once(student_data):
    student_data["name"]["firstName"] = "john"
    student_data["gender"] = "unknown"
    student_data["email"] = "a@b"
    del student_data["guardian"]

    with pytest.raises(ValidationError) as exc_info:
        StudentModel.validate(student_data)

    error = exc_info.value
    assert error.fields == ["name.firstName", "gender", "email", "guardian"]
    assert str(error).startswith("Student validation failed: name.firstName: john is not capitalized format")


def test_unknown_keys_are_dropped(student_data):
    student_data["nickname"] = "JD"
    student_data["guardian"]["uncle"] = "Bob"

    doc = StudentModel.validate(student_data)

    assert "nickname" not in doc
    assert "uncle" not in doc["guardian"]


def test_sub_record_of_wrong_type(student_data):
    student_data["name"] = "John Doe"
    assert errors_for(student_data) == {
        "name": 'Cast to Embedded failed for value "John Doe" at path "name"'
    }


def test_non_mapping_record_rejected():
    with pytest.raises(ValidationError) as exc_info:
        StudentModel.validate(["not", "a", "record"])
    assert exc_info.value.fields == [""]


def test_input_is_not_mutated(student_data):
    student_data["email"] = " a@b.co "
    StudentModel.validate(student_data)
    assert student_data["email"] == " a@b.co "


def test_is_valid(student_data):
    assert StudentModel.is_valid(student_data)
    student_data["gender"] = "unknown"
    assert not StudentModel.is_valid(student_data)
