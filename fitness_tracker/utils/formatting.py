def format_minutes(minutes: float) -> str:
    """Render a duration in minutes as HH:MM, dropping fractional minutes."""
    whole = int(minutes)
    return f"{whole // 60:02d}:{whole % 60:02d}"
