"""Configuration for ckv parsing and editing."""

from dataclasses import dataclass

DUPLICATE_POLICIES = ("last", "first")


@dataclass
class CkvConfig:
    """Policies applied while reading and editing ckv documents."""

    duplicate_keys: str = "last"  # Which occurrence of a repeated key is visible
    allow_empty_values: bool = True
    strict: bool = False  # Multi-line values must start after a bare "key="

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.duplicate_keys not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_keys must be one of {', '.join(DUPLICATE_POLICIES)}, "
                f"got {self.duplicate_keys!r}"
            )
