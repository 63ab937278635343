"""Cipher Lab: classical cipher library and HTTP API."""
