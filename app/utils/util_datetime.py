from datetime import datetime, timezone

# 與 SQLite datetime('now') 相同格式（UTC）
DB_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_text() -> str:
    return datetime.now(timezone.utc).strftime(DB_DATETIME_FORMAT)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def today_text() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")
