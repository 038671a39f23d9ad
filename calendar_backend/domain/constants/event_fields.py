class EventFields:
    """MongoDB field names for events collection"""

    MONGO_ID = "_id"

    OWNER_USER_ID = "owner_user_id"

    TITLE = "title"
    DESCRIPTION = "description"
    DATE_TIME = "date_time"
    IMPORTANCE = "importance"


class CounterFields:
    """MongoDB field names for the counters collection (integer id sequences)"""

    MONGO_ID = "_id"
    SEQUENCE = "seq"

    EVENTS_COUNTER = "events"
