from dataclasses import dataclass

from kin_cli.resolver import IdentityResolver


@dataclass
class KinDeps:
    """Runtime dependencies for CLI commands.

    main.py reads Settings once and builds these; commands reach identity
    only through ``resolver`` so resolution happens at most once per process.
    """

    resolver: IdentityResolver
    theme: str = "light"
