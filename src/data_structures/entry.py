from dataclasses import dataclass

SEPARATOR = " "


@dataclass(frozen=True)
class Entry:
    """
    A single phone book record.

    Attributes:
        key: Name portion of the record, used for sorting and exact lookups
        raw: The full record as read from the directory file
    """

    key: str
    raw: str

    def __str__(self) -> str:
        return self.raw


def parse_entry(raw: str) -> Entry:
    """
    Parse a "<number> <name>" line into an Entry.

    Lines without a separator are not rejected: the whole line becomes the key.
    """
    _, separator, name = raw.partition(SEPARATOR)
    return Entry(key=name if separator else raw, raw=raw)
