from .restricted_reader import RestrictedReader, IterableReader, is_max_size_exceeded
from .response_reader import classify_response, decode_body
from .request_form import RequestForm

__all__ = [
    "RestrictedReader",
    "IterableReader",
    "is_max_size_exceeded",
    "classify_response",
    "decode_body",
    "RequestForm",
]
