"""Subcommands of the boolquery CLI, registered in ``boolquery.cli``."""
