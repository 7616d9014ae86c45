"""In-memory clipboard adapter.

Stands in for the device clipboard that invite links are copied to.
The CLI prints the last copied text instead of touching the OS clipboard.
"""


class InMemoryClipboard:
    """Keeps every copied string; the last one is the clipboard content."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def copy(self, text: str) -> None:
        self.history.append(text)

    @property
    def content(self) -> str | None:
        return self.history[-1] if self.history else None
