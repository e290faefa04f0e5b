# Import all models so Base.metadata sees them
from edunotes.models.kv_entry import KeyValueEntry
