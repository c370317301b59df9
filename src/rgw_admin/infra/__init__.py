"""Infrastructure layer — adapters over external collaborators.

This layer wraps the standard library option parser.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~rgw_admin.exceptions.RgwAdminError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from rgw_admin.infra.option_parser import ArgparseOptionParser

__all__: list[str] = [
    "ArgparseOptionParser",
]
