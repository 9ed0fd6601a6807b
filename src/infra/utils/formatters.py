def format_duration(elapsed_seconds: float) -> str:
    if elapsed_seconds < 0:
        raise ValueError("Elapsed seconds must be non-negative")

    HOUR_SECONDS = 3_600
    MINUTE_SECONDS = 60

    hours, remainder = divmod(int(elapsed_seconds), HOUR_SECONDS)
    minutes, seconds = divmod(remainder, MINUTE_SECONDS)

    if hours:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"

    if minutes:
        return f"{minutes}m {seconds:02d}s"

    return f"{seconds}s"
