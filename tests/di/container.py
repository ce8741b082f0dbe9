"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from gameon.util.di import PROVIDERS, Component


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every swappable component is mocked
    unless named in ``unmock``.

    Examples:
        # Unit tests - in-memory repositories, recorded notifications
        container = build_test_container()

        # Integration tests - real persistence, assumes postgres running
        container = build_test_container(unmock={"persistence"})

        # Stored notifications need the real store as well
        container = build_test_container(unmock={"persistence", "notification"})

    Raises:
        ValueError: If a component is unknown or unmocked without its
            dependencies
    """
    unmock = unmock or set()
    _check_unmock(unmock)

    providers = [
        base.implementation(use_mock=base.__mock_component__ not in unmock)()
        if base.is_swappable()
        else base()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)


def _check_unmock(unmock: set[Component]) -> None:
    swappable = [base for base in PROVIDERS if base.is_swappable()]

    unknown = unmock - {base.__mock_component__ for base in swappable}
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    for base in swappable:
        if base.__mock_component__ not in unmock:
            continue
        missing = base.__depends_on__ - unmock
        if missing:
            raise ValueError(
                f"Component '{base.__mock_component__}' requires "
                f"{sorted(missing)} to be unmocked"
            )
