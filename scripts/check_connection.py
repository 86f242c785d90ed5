#!/usr/bin/env python3
"""
Connection Check Script

Verifies MongoDB is reachable, ensures the unique indexes exist and runs a
Student through create -> fetch -> delete.
Usage: python scripts/check_connection.py
"""
from student_records.core.config import get_settings
from student_records.core.errors import ConstraintViolation, ValidationError
from student_records.db.mongodb import init_mongo_indexes, test_mongo_connection
from student_records.services.student_service import StudentService


SAMPLE_STUDENT = {
    "id": "CHECK-0001",
    "name": {"firstName": "Asha", "lastName": "Rao"},
    "gender": "female",
    "dateOfBirth": "2003-02-14",
    "email": "asha.rao.check@example.com",
    "contactNo": "9876543210",
    "emergencyContactNo": "9876543211",
    "presentAddress": "21 MG Road, Bengaluru",
    "permanentAddress": "21 MG Road, Bengaluru",
    "guardian": {
        "fatherName": "Ravi Rao",
        "fatherOccupation": "Farmer",
        "fatherContactNo": "9000000011",
        "motherName": "Lata Rao",
        "motherOccupation": "Nurse",
        "motherContactNo": "9000000012",
    },
    "localGuardian": {
        "name": "Meena Iyer",
        "occupation": "Clerk",
        "contactNo": "9000000013",
        "address": "5 Church Street, Bengaluru",
    },
}


def main():
    settings = get_settings()
    print("=" * 50)
    print("STUDENT RECORDS - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        return
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Ensuring indexes...")
    init_mongo_indexes()
    print("    ✅ Unique indexes on students.id and students.email")

    print("\n[3] Round trip through the students collection...")
    service = StudentService()
    try:
        doc = service.create(SAMPLE_STUDENT)
        print(f"    ✅ Created: {doc['_id']} (isActive={doc['isActive']})")
        fetched = service.get_by_id(SAMPLE_STUDENT["id"])
        print(f"    ✅ Fetched: {fetched['name']['firstName']} {fetched['name']['lastName']}")
    except ValidationError as e:
        print(f"    ❌ Rejected: {e.messages}")
    except ConstraintViolation as e:
        print(f"    ⚠️  {e} (left over from an earlier run?)")
    finally:
        if service.delete(SAMPLE_STUDENT["id"]):
            print("    ✅ Sample removed")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
