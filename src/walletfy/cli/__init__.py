"""Typer + Rich command line for Walletfy."""
