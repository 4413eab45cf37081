from shadowstyle.cli.main import cli

__all__ = ["cli"]
