from lcovbridge.cli.main import cli

cli()
