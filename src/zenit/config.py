"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, freeze_on_match=True)
    """

    # Trace every lookup (hit or miss) on the "zenit.routing" logger
    debug: bool = False

    # Freeze the table on the first match() call; later register() raises
    freeze_on_match: bool = False

    # Level the CLI applies to the "zenit" logger hierarchy
    log_level: str = "warning"
