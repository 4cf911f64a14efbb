"""
Ordered form parts for a multipart/form-data request.

RequestForm only collects parts; httpx does the encoding. Text fields are
kept as filename-less parts alongside the attachments, so httpx always
encodes multipart/form-data (with `data=` alone it would fall back to
application/x-www-form-urlencoded) and caller order is preserved.
"""
from fb_fundraisers.errors import EncodingError

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


class RequestForm:
    def __init__(self):
        self._parts: list[tuple[str, tuple]] = []

    @property
    def parts(self) -> list[tuple[str, tuple]]:
        """Parts in the shape httpx accepts for `files=`."""
        return list(self._parts)

    @property
    def fields(self) -> dict[str, str]:
        """Text fields by name; the last value wins for repeated names."""
        return {
            name: value[1].decode("utf-8")
            for name, value in self._parts
            if value[0] is None
        }

    @property
    def files(self) -> dict[str, tuple[str, bytes, str]]:
        return {name: value for name, value in self._parts if value[0] is not None}

    def write_field(self, name: str, value: str) -> None:
        """Append a plain text field."""
        if not isinstance(value, str):
            raise EncodingError(f"field {name!r} must be a string, got {type(value).__name__}")
        self._parts.append((name, (None, value.encode("utf-8"))))

    def add_file(
        self,
        field_name: str,
        filename: str,
        content: bytes,
        content_type: str = DEFAULT_FILE_CONTENT_TYPE,
    ) -> None:
        """Append a file part whose content is already fully read."""
        if not filename:
            raise EncodingError(f"file part {field_name!r} needs a filename")
        self._parts.append((field_name, (filename, bytes(content), content_type)))
