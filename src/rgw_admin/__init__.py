"""rgw-admin: multi-word subcommand front end for gateway user administration.

Recognizes commands such as ``user create`` out of a flat argument vector,
validates the supplied option set per command, and dispatches to a handler.
"""

from rgw_admin.version import __version__

__all__: list[str] = ["__version__"]
