from csspalette.cli.main import cli

cli()
