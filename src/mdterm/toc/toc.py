from mdterm.parsers.models import ParsedDocument, TocEntry


def table_of_contents(document: ParsedDocument) -> tuple[TocEntry, ...]:
    # headings are already immutable and ordered by line number
    return document.headings
