"""
Command-line constants and resource limits.
"""

# Argument requirement flags for Command.add_arg()
ARG_REQUIRED = True
ARG_OPTIONAL = False

# Name every command reserves for its help argument
HELP_ARG = "help"

# Resource limits
MAX_COMMAND_COUNT = 1000  # Maximum number of commands in a registry
MAX_COMMAND_NAME_LENGTH = 255  # Maximum length for command names
MAX_ALIAS_COUNT = 100  # Maximum number of aliases per command

# Process exit statuses used by the runner
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130
