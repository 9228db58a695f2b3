"""Encoding constants for JDE packed dates and times."""

JDE_BASE_YEAR = 1900
"""Year encoded as offset 0 in a JDE date."""

JDE_YEAR_FACTOR = 1000
"""Multiplier applied to the year offset; the low three digits hold the day of year."""

JDE_HOUR_FACTOR = 10000
"""Weight of the hour digits in a JDE time that includes seconds."""

JDE_MINUTE_FACTOR = 100
"""Weight of the minute digits (or of the hour digits when seconds are omitted)."""

TIME_FORMAT_WITH_SECONDS = "{hour:02d}{minute:02d}{second:02d}"
TIME_FORMAT_WITHOUT_SECONDS = "{hour:02d}{minute:02d}"
