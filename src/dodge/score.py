def format_score(score_ms: int) -> str:
    """Format a duration in milliseconds as MM:SS:mmm.

    Minutes are not wrapped into hours: 3600000 -> '60:00:000'.
    """
    score_ms = int(score_ms)
    if score_ms < 0:
        raise ValueError(f"score cannot be negative: {score_ms}")
    minutes, rest = divmod(score_ms, 60 * 1000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes:02d}:{seconds:02d}:{millis:03d}"
