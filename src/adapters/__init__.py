"""Adapters: HTTP access to the REST service and output exporters."""
