from bunnygraph.cli import cli

cli()
