from datetime import datetime, timezone


def utcnow_iso() -> str:
    # Microsecond precision keeps created_at ordering stable for rows written in the same second.
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
