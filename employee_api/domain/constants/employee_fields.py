"""Constants for Employee model field names"""


class EmployeeFields:
    """Field name constants for Employee model"""
    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    GENDER = "gender"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    JOB_TITLE = "job_title"
    DEPARTMENT = "department"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field, also the JSON key clients read

    # Client-editable attributes, in display order
    ATTRIBUTES = (
        FIRST_NAME,
        LAST_NAME,
        GENDER,
        EMAIL,
        PHONE_NUMBER,
        JOB_TITLE,
        DEPARTMENT,
    )


class Gender:
    """Accepted values for the gender field"""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    ALL = (MALE, FEMALE, OTHER)
