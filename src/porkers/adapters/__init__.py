"""Adapters: concrete HTTP transport and the Porkbun operations built on it."""
