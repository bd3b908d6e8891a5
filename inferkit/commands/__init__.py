"""Click subcommands for the inferkit CLI."""
