from category_cli.cli import start_cli

start_cli()
