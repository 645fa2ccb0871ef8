"""HTTP infrastructure components."""

from .client import HttpClient, HttpResponse, HttpTransport, QueryParams

__all__ = ["HttpClient", "HttpResponse", "HttpTransport", "QueryParams"]
