"""Bookmarker adapters — Discord REST and the HTTP shell."""
