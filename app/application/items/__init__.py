"""
Items bounded context, application layer.

One use case per HTTP operation. Use cases return ItemResult values;
they never build HTTP responses.
"""
