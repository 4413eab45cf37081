from shadowstyle.cli import cli

cli()
