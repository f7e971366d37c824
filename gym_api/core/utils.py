from datetime import datetime, timezone

# Stored timestamp format; the stats queries compare these as plain strings.
ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def to_iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime(ISO_FORMAT)

def parse_iso(value: str) -> datetime:
    return datetime.strptime(value, ISO_FORMAT).replace(tzinfo=timezone.utc)
