"""Seed sets loaded into the user store at startup."""

from user_directory.models.user import User
from user_directory.services.user_store import InMemoryUserStore

CLASSIC_SEED: tuple[User, ...] = (
    User(id=0, name="Steve Rogers"),
    User(id=1, name="Tony Stark"),
    User(id=2, name="Carol Danvers"),
)

EXTENDED_SEED: tuple[User, ...] = (
    User(id=0, name="Steve Rogers"),
    User(id=1, name="Tony Stark"),
    User(id=2, name="Bruce Banner"),
    User(id=3, name="Natasha Romanoff"),
    User(id=4, name="Carol Danvers"),
)

SEED_VARIANTS: dict[str, tuple[User, ...]] = {
    "classic": CLASSIC_SEED,
    "extended": EXTENDED_SEED,
}


def build_user_store(variant: str = "extended") -> InMemoryUserStore:
    """Build a fresh store from a named seed set.

    Args:
        variant: Seed variant name ("classic" or "extended"), case-insensitive

    Returns:
        InMemoryUserStore holding the seed users

    Raises:
        ValueError: If the variant is unknown
    """
    key = variant.strip().lower()
    if key not in SEED_VARIANTS:
        raise ValueError(f"Unknown user seed '{variant}'. Expected one of: {', '.join(SEED_VARIANTS)}")
    return InMemoryUserStore(SEED_VARIANTS[key])
