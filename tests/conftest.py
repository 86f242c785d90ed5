import copy
from unittest.mock import MagicMock

import pytest

VALID_STUDENT = {
    "id": "S-1001",
    "name": {"firstName": "John", "middleName": "Paul", "lastName": "Doe"},
    "gender": "male",
    "dateOfBirth": "2001-05-10",
    "email": "john.doe@example.com",
    "contactNo": "9876543210",
    "emergencyContactNo": "9123456780",
    "bloodGroup": "O+",
    "presentAddress": "12 Lake Road, Pune",
    "permanentAddress": "4 Hill Street, Nashik",
    "guardian": {
        "fatherName": "Richard Doe",
        "fatherOccupation": "Engineer",
        "fatherContactNo": "9000000001",
        "motherName": "Mary Doe",
        "motherOccupation": "Teacher",
        "motherContactNo": "9000000002",
    },
    "localGuardian": {
        "name": "Alan Smith",
        "occupation": "Doctor",
        "contactNo": "9000000003",
        "address": "7 Park Avenue, Pune",
    },
    "profileImg": "john.jpg",
}


@pytest.fixture
def student_data():
    """A Student record that passes every rule. Tests mutate their own copy."""
    return copy.deepcopy(VALID_STUDENT)


@pytest.fixture
def mock_collection():
    """Stand-in for a pymongo Collection."""
    return MagicMock()
