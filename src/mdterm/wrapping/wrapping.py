def word_wrap(text: str, width: int) -> list[str]:
    """Greedy word wrap.

    Breaks at the last space at or before `width`; a word longer than
    `width` is hard-broken. Whitespace around each break is dropped.
    """
    if width <= 0:
        raise ValueError("width must be > 0")

    if len(text) <= width:
        return [text]

    fragments: list[str] = []
    remaining = text

    while remaining:
        if len(remaining) <= width:
            fragments.append(remaining)
            break

        break_at = remaining.rfind(" ", 0, width + 1)
        if break_at <= 0:
            break_at = width

        fragments.append(remaining[:break_at].rstrip())
        remaining = remaining[break_at:].lstrip()

    return fragments
