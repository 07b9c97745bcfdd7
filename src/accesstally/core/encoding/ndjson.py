"""NDJSON and JSON encoders for histograms and summaries."""

import json
from collections.abc import Iterable, Mapping

from accesstally.core.histogram import Histogram


def encode_histograms(histograms: Iterable[Histogram]) -> str:
    """Encode histograms to newline-delimited JSON.

    Args:
        histograms: An iterable of Histogram objects.

    Returns:
        NDJSON string with one object per counter, e.g.
        ``{"histogram": "hour", "value": 13, "count": 4}``.
        Empty string if there are no counters.
    """
    lines = []
    for histogram in histograms:
        for slot, count in enumerate(histogram.counts):
            obj = {
                "histogram": histogram.name,
                "value": slot + histogram.first,
                "count": count,
            }
            lines.append(json.dumps(obj))

    if not lines:
        return ""

    return "\n".join(lines) + "\n"


def encode_summary(summary: Mapping[str, int]) -> str:
    """Encode an analyzer summary as a single JSON document."""
    return json.dumps(dict(summary), indent=2)
