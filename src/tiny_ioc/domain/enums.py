from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a resolved instance lives.

    Attributes:
        SINGLETON: One instance per type, produced by a factory and cached.
        TRANSIENT: New instance on every construction.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value


class ContainerState(str, Enum):
    """Lifecycle state of a registry or container."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"

    def __str__(self) -> str:
        return self.value


class MissingDependencyPolicy(str, Enum):
    """What autowiring does when a parameter type has no bean.

    Attributes:
        PLACEHOLDER: Inject the parameter default, or None, and keep going.
        FAIL_FAST: Raise MissingDependencyError.
    """

    PLACEHOLDER = "placeholder"
    FAIL_FAST = "fail_fast"

    def __str__(self) -> str:
        return self.value


class Absent(Enum):
    """Sentinel returned by get_bean when no factory exists for a type.

    Distinct from None, which is a legitimate bean value.
    """

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent.ABSENT
