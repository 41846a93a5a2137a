from hotel_booking_api.api.validation import (
    INTEGER,
    NOT_EMPTY,
    POSITIVE,
    REQUIRED,
    STRING,
    RequestSchema,
    less_than,
)

TEXT_FIELD = (REQUIRED, STRING, NOT_EMPTY, less_than(256))

SIGN_UP_SCHEMA = RequestSchema(
    {
        "name": TEXT_FIELD,
        "email": TEXT_FIELD,
        "password": TEXT_FIELD,
    }
)

LOGIN_WITH_EMAIL_AND_PASSWORD_SCHEMA = RequestSchema(
    {
        "email": TEXT_FIELD,
        "password": TEXT_FIELD,
    }
)

CREATE_ROOM_SCHEMA = RequestSchema(
    {
        "number": TEXT_FIELD,
        "type": TEXT_FIELD,
        "capacity": (REQUIRED, INTEGER, POSITIVE, less_than(1000)),
        "price": (REQUIRED, INTEGER, POSITIVE, less_than(1_000_000_000)),
    }
)
