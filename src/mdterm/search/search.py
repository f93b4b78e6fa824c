from dataclasses import dataclass
from time import monotonic

from mdterm.observability import names
from mdterm.observability.base import MetricsHook, NoOpMetricsHook
from mdterm.parsers.models import ParsedDocument

CONTEXT_CHARS = 20


@dataclass(frozen=True)
class SearchMatch:
    line_number: int
    column_start: int
    column_end: int
    match_text: str
    context: str


def search_document(
    document: ParsedDocument,
    query: str,
    case_sensitive: bool = False,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[SearchMatch]:
    """
    Find every occurrence of `query` in the rendered text of each line.

    The scan restarts one character after each match start, so
    overlapping occurrences are all reported ("aa" in "aaa" matches twice).
    """
    if not query:
        return []

    start = monotonic()
    needle = query if case_sensitive else query.lower()
    matches: list[SearchMatch] = []

    for line in document.lines:
        line_text = line.plain_text
        haystack = line_text if case_sensitive else line_text.lower()

        index = haystack.find(needle)
        while index != -1:
            end = index + len(query)
            matches.append(
                SearchMatch(
                    line_number=line.line_number,
                    column_start=index,
                    column_end=end,
                    match_text=line_text[index:end],
                    context=line_text[
                        max(0, index - CONTEXT_CHARS) : min(
                            len(line_text), end + CONTEXT_CHARS
                        )
                    ],
                )
            )
            index = haystack.find(needle, index + 1)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SEARCH_DURATION, elapsed_ms)
    metrics_hook.increment(names.SEARCH_MATCHES, len(matches))
    return matches
