from .flags import decode_active_flag, decode_flag_or_default, encode_active_flag
from .migrator import SQLiteMigrator
from .repos import SQLiteBlockRepo, SQLiteEventStore, SQLiteLinkRepo, SQLiteProfileRepo

__all__ = [
    "SQLiteMigrator",
    "SQLiteProfileRepo",
    "SQLiteLinkRepo",
    "SQLiteBlockRepo",
    "SQLiteEventStore",
    "encode_active_flag",
    "decode_active_flag",
    "decode_flag_or_default",
]
