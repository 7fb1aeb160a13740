from typing import Optional


def next_after_removal(removed_position: int, new_length: int) -> Optional[int]:
    """Position to display after the row at removed_position was removed.

    new_length is the list length after removal. The row that slid into the
    removed slot wins; when the last row went, its predecessor is shown.
    Returns None once nothing precedes the removed slot. Callers passing a
    position outside the list get the rule applied as is and must range-check.
    """
    if removed_position < new_length:
        return removed_position
    if removed_position - 1 >= 0:
        return removed_position - 1
    return None
