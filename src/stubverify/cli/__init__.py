"""Command line interface for stubverify."""
