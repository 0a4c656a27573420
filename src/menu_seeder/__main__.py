from menu_seeder.cli import cli

cli()
