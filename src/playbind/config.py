"""Binding configuration.

BindingConfig is a frozen dataclass — immutable after creation, shared freely
between threads, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BindingConfig:
    """Options-marshalling and routing configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BindingConfig(case_sensitive_globs=False, log_unmatched=True)
    """

    # Field metadata key holding a record field's external (wire) name
    name_key: str = "json"

    # Route matching
    case_sensitive_globs: bool = True
    log_unmatched: bool = False  # Debug-log URLs that no route entry matches


DEFAULT_CONFIG = BindingConfig()
