"""Ordered parameter container passed between the service and executor layers."""

from urllib.parse import quote


class ParamsMap(dict[str, str | None]):
    """Mapping of parameter names to string values.

    Insertion order is kept. Entries whose value is ``None`` may be stored but
    are left out of the encoded URL string.
    """

    def put(self, key: str, value: str | None) -> None:
        """Store or overwrite an entry. ``None`` is allowed."""
        self[key] = value

    def add_param(self, key: str, value: str | None) -> None:
        """Store an entry only when value is not ``None``."""
        if value is not None:
            self[key] = value

    def remove(self, key: str) -> None:
        """Delete an entry if present."""
        self.pop(key, None)

    def get_url_string(self) -> str:
        """Encode entries as ``key=value`` pairs joined by ``&``.

        Values are percent-encoded with no safe characters, so reserved
        characters can never break the query string.
        """
        return "&".join(
            f"{key}={quote(str(value), safe='')}" for key, value in self.items() if value is not None
        )
