"""Contracts (protocols) between the live board components."""
