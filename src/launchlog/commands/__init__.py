"""launchlog subcommands (register/run convention, see launchlog.cli)."""
