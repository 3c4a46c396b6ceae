"""Windowing of rendered choice lists."""

from prompt_choices.ui.formatting import MORE_CHOICES_HINT


def calculate_visible_range(
    cursor: int,
    total_rows: int,
    limit: int,
    scroll_offset: int,
) -> tuple[int, int, int]:
    """Pick the slice of rendered rows to show so the cursor row stays in view.

    The window is kept full when it reaches the last row, so the hint line
    always follows exactly ``limit`` rows.

    Args:
        cursor: Row holding the active choice (separator rows included)
        total_rows: Number of rendered rows
        limit: Row limit of the window
        scroll_offset: First row shown by the previous render

    Returns:
        Tuple of (new_scroll_offset, first_row, end_row)
    """
    if total_rows == 0:
        return 0, 0, 0

    # Cursor rows past the end pin the window to the bottom
    row = max(0, min(cursor, total_rows - 1))
    if row < scroll_offset:
        scroll_offset = row
    elif row >= scroll_offset + limit:
        scroll_offset = row - limit + 1

    first = max(0, min(scroll_offset, total_rows - limit))
    return first, first, min(first + limit, total_rows)


class Paginator:
    """Keeps a window of at most ``limit`` rows around the cursor.

    The scroll offset is remembered between calls so the window only
    moves when the cursor leaves it.
    """

    def __init__(self, limit: int | None = None, hint: str = MORE_CHOICES_HINT):
        self.limit = limit
        self.hint = hint
        self.scroll_offset = 0

    def paginate(self, text: str, cursor: int, limit: int | None = None) -> str:
        """Return text windowed to ``limit`` rows.

        A leading line break in ``text`` is kept and not counted as a row.
        The hint is appended whenever rows are hidden.
        """
        limit = limit or self.limit
        head = ""
        body = text
        if body.startswith("\n"):
            head, body = "\n", body[1:]

        rows = body.split("\n")
        if not limit or len(rows) <= limit:
            return text

        self.scroll_offset, start, end = calculate_visible_range(
            cursor=cursor,
            total_rows=len(rows),
            limit=limit,
            scroll_offset=self.scroll_offset,
        )
        return head + "\n".join([*rows[start:end], self.hint])

    def reset(self) -> None:
        self.scroll_offset = 0
