"""Transport-neutral HTTP request and response envelopes."""

from passcheck.interfaces.http.envelopes import HttpRequest, HttpResponse

__all__ = ["HttpRequest", "HttpResponse"]
